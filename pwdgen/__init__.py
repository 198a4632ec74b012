#!/usr/bin/env python3
"""
pwdgen - Pronounceable Password Generator
=========================================

Generates passwords built from symbols, digits and pronounceable
onset+rime phonemes. Every password is at least the requested length and
carries at least 32 bits of conservatively estimated entropy.

Quick Start
-----------
    import pwdgen

    pwdgen.generate_password()        # min length 14, secure source
    pwdgen.generate_password(20)      # min length 20, secure source

    # Explicit source, e.g. reproducible output in tests
    rng = pwdgen.SeededRandom(42)
    pwdgen.generate_password(12, rng)

    # Full result with length and entropy
    result = pwdgen.build_password(12, pwdgen.SecureRandom())

Modules
-------
    pwdgen.builder       - Password construction loop
    pwdgen.phonemes      - Onset/rime tables
    pwdgen.random_source - Randomness sources
    pwdgen.parallel      - Batch generation on a thread pool
    pwdgen.settings      - YAML settings

CLI Usage
---------
    python -m pwdgen
    python -m pwdgen -n 5 -l 16
"""

__version__ = "1.0.0"

from typing import Optional

from .errors import (
    PwdGenError,
    RandomSourceUnavailable,
    InvalidLengthError,
    InvalidSourceError,
    IterationLimitExceeded,
)
from .random_source import (
    RandomSource,
    SecureRandom,
    SeededRandom,
    ScriptedRandom,
    LockedRandom,
    CheckedSource,
    as_source,
)
from .phonemes import ONSETS, RIMES, PHONEME_ENTROPY, phoneme
from .builder import (
    SYMBOLS,
    MIN_ENTROPY,
    GenerationResult,
    PasswordBuilder,
    build_password,
)
from .parallel import BatchGenerator, generate_batch
from .settings import get_int_setting

DEFAULT_MIN_LENGTH = 14


def generate_password(min_length: Optional[int] = None,
                      rng: Optional[RandomSource] = None) -> str:
    """
    Generate a pronounceable password.

    Args:
        min_length: Minimum length (default: generator.default_min_length, 14)
        rng: Randomness source; a new SecureRandom when omitted

    Returns:
        The password string

    Raises:
        RandomSourceUnavailable: If rng is omitted and the runtime has no
            secure random source
        InvalidLengthError: If min_length is not a positive integer
    """
    if min_length is None:
        min_length = get_int_setting("generator.default_min_length", DEFAULT_MIN_LENGTH)
    if rng is None:
        rng = SecureRandom()
    return build_password(min_length, rng).password


__all__ = [
    '__version__',
    'generate_password',
    'build_password',
    'PasswordBuilder',
    'GenerationResult',
    'BatchGenerator',
    'generate_batch',
    'phoneme',
    'ONSETS',
    'RIMES',
    'PHONEME_ENTROPY',
    'SYMBOLS',
    'MIN_ENTROPY',
    'DEFAULT_MIN_LENGTH',
    'RandomSource',
    'SecureRandom',
    'SeededRandom',
    'ScriptedRandom',
    'LockedRandom',
    'CheckedSource',
    'as_source',
    'PwdGenError',
    'RandomSourceUnavailable',
    'InvalidLengthError',
    'InvalidSourceError',
    'IterationLimitExceeded',
]
