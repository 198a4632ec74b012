#!/usr/bin/env python3
"""
pwdgen CLI
==========
Command-line interface for password generation.

Usage:
    pwdgen                    # 100 passwords, min length 12
    pwdgen -n 5 -l 16
    pwdgen --table -n 10
    pwdgen --seed 42 -n 3     # reproducible, NOT secure

Passwords go to stdout, one per line. Each is preceded by an
"entropy: N length: M" line on stderr unless --quiet is given.
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from pwdgen import __version__
from pwdgen.builder import GenerationResult, PasswordBuilder
from pwdgen.errors import PwdGenError, RandomSourceUnavailable
from pwdgen.random_source import SecureRandom, SeededRandom
from pwdgen.settings import get_int_setting

# =============================================================================
# Constants
# =============================================================================

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_SECURE_SOURCE = 10

DEFAULT_COUNT = 100
DEFAULT_MIN_LENGTH = 12

# =============================================================================
# Utilities
# =============================================================================


class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.stderr = Console(stderr=True, highlight=False)
        self.stdout = Console(highlight=False)

    def password(self, result: GenerationResult):
        print(result.password)

    def diagnostic(self, result: GenerationResult):
        if not self.quiet:
            self.stderr.print(f"entropy: {int(result.entropy)} length: {result.length}",
                              markup=False, soft_wrap=True)

    def warning(self, msg: str):
        if not self.quiet:
            self.stderr.print(f"Warning: {msg}", style="yellow", markup=False, soft_wrap=True)

    def error(self, msg: str):
        self.stderr.print(f"Error: {msg}", style="bold red", markup=False, soft_wrap=True)

    def table(self, results):
        """Print results as a table."""
        table = Table(title=f"{len(results)} passwords")
        table.add_column("#", justify="right")
        table.add_column("Password", style="bold")
        table.add_column("Length", justify="right")
        table.add_column("Entropy", justify="right")
        for i, result in enumerate(results, 1):
            table.add_row(str(i), Text(result.password), str(result.length), f"{result.entropy:.1f}")
        self.stdout.print(table)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output) -> int:
    """Generate and print passwords."""
    if args.seed is not None:
        out.warning(f"Seeded generator (seed={args.seed}) is reproducible and NOT secure")
        rng = SeededRandom(args.seed)
    else:
        try:
            rng = SecureRandom()
        except RandomSourceUnavailable as e:
            out.error(str(e))
            return EXIT_NO_SECURE_SOURCE

    if args.table:
        builder = PasswordBuilder(rng)
        out.table([builder.build(args.min_length) for _ in range(args.count)])
        return EXIT_OK

    builder = PasswordBuilder(rng, on_result=out.diagnostic)
    for _ in range(args.count):
        out.password(builder.build(args.min_length))
    return EXIT_OK


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pwdgen',
        description='pwdgen - Pronounceable Password Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s -n 5 -l 16
  %(prog)s --table -n 10 -q
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress entropy/length diagnostics')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    parser.add_argument('-n', '--count', type=non_negative_int,
                        default=get_int_setting("cli.count", DEFAULT_COUNT, minimum=0),
                        help='Number of passwords (default: %(default)s)')
    parser.add_argument('-l', '--min-length', type=positive_int,
                        default=get_int_setting("cli.min_length", DEFAULT_MIN_LENGTH),
                        help='Minimum password length (default: %(default)s)')
    parser.add_argument('--table', '-t', action='store_true', help='Show passwords as a table')
    parser.add_argument('--seed', type=int, help='Use a seeded, insecure generator (for demos)')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    out = Output(quiet=args.quiet)

    try:
        return cmd_generate(args, out)
    except KeyboardInterrupt:
        out.error("Cancelled.")
        return 130
    except PwdGenError as e:
        out.error(str(e))
        if args.verbose:
            import traceback
            traceback.print_exc()
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
