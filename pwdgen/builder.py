#!/usr/bin/env python3
"""
Password Builder
================
Builds a pronounceable password out of symbols, digits and phonemes until
it is both long enough and carries at least MIN_ENTROPY bits.

Each iteration draws a selector in [0, 100) and appends one piece:
- selector > 80 (19%) - one symbol from SYMBOLS
- selector > 50 (30%) - one decimal digit
- otherwise     (51%) - one phoneme (onset + rime)

Every iteration adds a fixed log2(3) for the three-way choice, slightly
more than the unequal 19/30/51 split carries, plus log2(table size) for
the piece itself.

The number of iterations depends on the draws. Every iteration adds at
least log2(3) + log2(10) bits and one character, so the loop ends within
max(min_length, 7) iterations. The cap, max(max_iterations, min_length),
only trips for sources that do not honor next_int().

Usage:
    from pwdgen.builder import build_password
    from pwdgen.random_source import SecureRandom

    result = build_password(12, SecureRandom())
    print(result.password, result.length, result.entropy)
"""

import logging
from dataclasses import dataclass
from math import log2
from typing import Callable, Optional

from pwdgen.errors import InvalidLengthError, IterationLimitExceeded
from pwdgen.phonemes import phoneme
from pwdgen.random_source import RandomSource, as_source
from pwdgen.settings import get_int_setting

logger = logging.getLogger(__name__)


# =============================================================================
# Policy Constants
# =============================================================================

SYMBOLS = ('!', '.', '%', ',', '-', '+', '*', '_', '/', '\\', '$', '#', '~')
DIGITS = '0123456789'

MIN_ENTROPY = 32.0

SELECTOR_RANGE = 100
SYMBOL_THRESHOLD = 80   # selector > 80: symbol
DIGIT_THRESHOLD = 50    # selector > 50: digit

# Fixed at log2(3) although the three branches are not equiprobable
CHOICE_ENTROPY = log2(3)
SYMBOL_ENTROPY = log2(len(SYMBOLS))
DIGIT_ENTROPY = log2(len(DIGITS))

DEFAULT_MAX_ITERATIONS = 1000


@dataclass(frozen=True)
class GenerationResult:
    """A generated password with its final length and entropy estimate."""
    password: str
    length: int
    entropy: float
    iterations: int

    def __str__(self) -> str:
        return self.password


ResultCallback = Callable[[GenerationResult], None]


# =============================================================================
# Builder
# =============================================================================

class PasswordBuilder:
    """
    Builds passwords from an injected randomness source.

    The builder keeps no per-password state; buffer and entropy live in
    build(), so one builder may serve several threads as long as its source
    is safe for concurrent draws (see LockedRandom).
    """

    def __init__(self, rng: RandomSource,
                 max_iterations: Optional[int] = None,
                 on_result: Optional[ResultCallback] = None):
        """
        Args:
            rng: Source of uniform integers
            max_iterations: Loop cap (default: generator.max_iterations setting)
            on_result: Called with every finished GenerationResult
        """
        self.rng = as_source(rng)
        if max_iterations is None:
            max_iterations = get_int_setting("generator.max_iterations", DEFAULT_MAX_ITERATIONS)
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}")
        self.max_iterations = max_iterations
        self.on_result = on_result

    def build(self, min_length: int) -> GenerationResult:
        """
        Generate one password.

        Args:
            min_length: Minimum number of characters, at least 1

        Returns:
            GenerationResult with length >= min_length and entropy >= MIN_ENTROPY

        Raises:
            InvalidLengthError: If min_length is not a positive integer
            IterationLimitExceeded: If the loop hits max_iterations
        """
        if isinstance(min_length, bool) or not isinstance(min_length, int) or min_length < 1:
            raise InvalidLengthError(min_length)

        # Every piece is at least one character long
        limit = max(self.max_iterations, min_length)

        buf = []
        length = 0
        entropy = 0.0
        iterations = 0

        while length < min_length or entropy < MIN_ENTROPY:
            if iterations >= limit:
                raise IterationLimitExceeded(limit, length, entropy)
            iterations += 1

            entropy += CHOICE_ENTROPY
            piece, bits = self._next_piece()
            buf.append(piece)
            length += len(piece)
            entropy += bits

        result = GenerationResult(
            password=''.join(buf),
            length=length,
            entropy=entropy,
            iterations=iterations,
        )
        logger.debug(f"entropy: {int(entropy)} length: {length} iterations: {iterations}")

        if self.on_result is not None:
            self.on_result(result)
        return result

    def _next_piece(self):
        """Draw the branch selector and return (piece, piece_entropy)."""
        choice = self.rng.next_int(SELECTOR_RANGE)

        if choice > SYMBOL_THRESHOLD:
            return SYMBOLS[self.rng.next_int(len(SYMBOLS))], SYMBOL_ENTROPY

        if choice > DIGIT_THRESHOLD:
            return DIGITS[self.rng.next_int(len(DIGITS))], DIGIT_ENTROPY

        return phoneme(self.rng)


def build_password(min_length: int, rng: RandomSource,
                   on_result: Optional[ResultCallback] = None,
                   max_iterations: Optional[int] = None) -> GenerationResult:
    """Generate one password; see PasswordBuilder.build()."""
    builder = PasswordBuilder(rng, max_iterations=max_iterations, on_result=on_result)
    return builder.build(min_length)


__all__ = [
    'SYMBOLS',
    'DIGITS',
    'MIN_ENTROPY',
    'CHOICE_ENTROPY',
    'SYMBOL_ENTROPY',
    'DIGIT_ENTROPY',
    'GenerationResult',
    'PasswordBuilder',
    'build_password',
]
