#!/usr/bin/env python3
"""
Error Types
===========
Exceptions raised by pwdgen.

    PwdGenError
    ├── RandomSourceUnavailable   no secure randomness in this runtime
    ├── InvalidLengthError        minimum length is not a positive integer
    ├── InvalidSourceError        object cannot act as a randomness source
    └── IterationLimitExceeded    generation loop hit its iteration cap
"""


class PwdGenError(Exception):
    """Base class for all pwdgen errors."""


class RandomSourceUnavailable(PwdGenError):
    """
    The runtime cannot supply a cryptographically secure random source.

    This is an environment defect. Callers should not retry.
    """


class InvalidLengthError(PwdGenError, ValueError):
    """Minimum password length must be a positive integer."""

    def __init__(self, min_length):
        self.min_length = min_length
        super().__init__(f"min_length must be a positive integer, got {min_length!r}")


class InvalidSourceError(PwdGenError, ValueError):
    """Object does not provide next_int() or randrange()."""


class IterationLimitExceeded(PwdGenError, RuntimeError):
    """Generation did not converge within the iteration cap."""

    def __init__(self, limit: int, length: int, entropy: float):
        self.limit = limit
        self.length = length
        self.entropy = entropy
        super().__init__(
            f"Password generation exceeded {limit} iterations "
            f"(length={length}, entropy={entropy:.2f} bits)"
        )


__all__ = [
    'PwdGenError',
    'RandomSourceUnavailable',
    'InvalidLengthError',
    'InvalidSourceError',
    'IterationLimitExceeded',
]
