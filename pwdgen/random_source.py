#!/usr/bin/env python3
"""
Randomness Sources
==================
Injectable sources of uniformly distributed bounded integers.

Every source exposes a single method, ``next_int(bound)``, returning an
integer in ``[0, bound)``. The password builder never constructs a source
itself; callers pass one in.

Sources:
- SecureRandom   - OS CSPRNG via secrets.SystemRandom (production)
- SeededRandom   - reproducible random.Random stream (tests, demos)
- ScriptedRandom - replays a fixed list of values (golden tests)
- LockedRandom   - serializes draws on a wrapped source across threads
- CheckedSource  - range-checks draws from third-party next_int() objects

Usage:
    from pwdgen.random_source import SecureRandom

    rng = SecureRandom()
    rng.next_int(100)
"""

import itertools
import os
import random
import secrets
import threading
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from pwdgen.errors import InvalidSourceError, RandomSourceUnavailable


def _check_bound(bound: int) -> None:
    if not isinstance(bound, int) or bound < 1:
        raise ValueError(f"bound must be a positive integer, got {bound!r}")


class RandomSource(ABC):
    """Base class for randomness sources."""

    @abstractmethod
    def next_int(self, bound: int) -> int:
        """Return a uniformly distributed integer N with 0 <= N < bound."""


# =============================================================================
# Production Source
# =============================================================================

class SecureRandom(RandomSource):
    """
    Cryptographically secure source backed by the operating system.

    Draws go through secrets.SystemRandom, which reads os.urandom() and
    keeps no state in the process, so one instance can be shared between
    threads.

    Raises:
        RandomSourceUnavailable: If the OS has no usable entropy source.
    """

    def __init__(self):
        try:
            os.urandom(1)
        except (NotImplementedError, OSError) as e:
            raise RandomSourceUnavailable(
                f"No cryptographically secure random source available: {e}"
            ) from e
        self._rng = secrets.SystemRandom()

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        return self._rng.randrange(bound)


# =============================================================================
# Deterministic Sources
# =============================================================================

class SeededRandom(RandomSource):
    """
    Reproducible source backed by a seeded Mersenne Twister.

    NOT suitable for real passwords. Two instances built with the same seed
    yield identical streams.
    """

    def __init__(self, seed: Any):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        return self._rng.randrange(bound)


class ScriptedRandom(RandomSource):
    """
    Replays a fixed sequence of integers, cycling when exhausted.

    Each value is reduced modulo the requested bound, so the script can be
    written in terms of table indexes.
    """

    def __init__(self, values: Iterable[int]):
        self.values = tuple(values)
        if not self.values:
            raise ValueError("ScriptedRandom needs at least one value")
        self._stream = itertools.cycle(self.values)
        self.calls = 0

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        self.calls += 1
        return next(self._stream) % bound


# =============================================================================
# Adapters
# =============================================================================

class LockedRandom(RandomSource):
    """Serializes draws on a source that is not safe for concurrent use."""

    def __init__(self, source: RandomSource):
        self.source = as_source(source)
        self._lock = threading.Lock()

    def next_int(self, bound: int) -> int:
        with self._lock:
            return self.source.next_int(bound)


class RandomAdapter(RandomSource):
    """Exposes a random.Random compatible object as a RandomSource."""

    def __init__(self, rng):
        self.rng = rng

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        return self.rng.randrange(bound)


class CheckedSource(RandomSource):
    """
    Range-checks a third-party object that provides next_int().

    A value outside [0, bound) would index the tables from the end or past
    them, so it is rejected rather than used.
    """

    def __init__(self, source):
        self.source = source

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        value = self.source.next_int(bound)
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < bound:
            raise InvalidSourceError(
                f"{type(self.source).__name__}.next_int({bound}) returned {value!r}, "
                f"expected an integer in [0, {bound})"
            )
        return value


def as_source(obj: Optional[Any]) -> RandomSource:
    """
    Coerce obj into a RandomSource.

    Accepts anything with next_int(bound), or a random.Random style object
    with randrange(). Objects that are not RandomSource subclasses get their
    draws range-checked. Anything else raises InvalidSourceError.
    """
    if obj is None:
        raise InvalidSourceError("A randomness source is required")
    if isinstance(obj, RandomSource):
        return obj
    if callable(getattr(obj, 'next_int', None)):
        return CheckedSource(obj)
    if callable(getattr(obj, 'randrange', None)):
        return RandomAdapter(obj)
    raise InvalidSourceError(
        f"{type(obj).__name__} provides neither next_int() nor randrange()"
    )


__all__ = [
    'RandomSource',
    'SecureRandom',
    'SeededRandom',
    'ScriptedRandom',
    'LockedRandom',
    'RandomAdapter',
    'CheckedSource',
    'as_source',
]
