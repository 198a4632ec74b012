"""Allow running as ``python -m pwdgen``."""

import sys

from pwdgen.cli import main

sys.exit(main())
