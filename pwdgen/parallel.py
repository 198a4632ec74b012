#!/usr/bin/env python3
"""
Batch Generation
================
Generates many passwords on a thread pool.

Each worker thread builds its own randomness source from source_factory
the first time it runs a task, so no source is shared between threads.

Usage:
    from pwdgen.parallel import generate_batch

    for result in generate_batch(100, min_length=12, workers=4):
        print(result.password)
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

from pwdgen.builder import GenerationResult, PasswordBuilder
from pwdgen.random_source import RandomSource, SecureRandom
from pwdgen.settings import get_int_setting

logger = logging.getLogger(__name__)

SourceFactory = Callable[[], RandomSource]


class BatchGenerator:
    """
    Thread pool password generator with one source per worker thread.

    Usage:
        batch = BatchGenerator(workers=4)
        results = batch.generate(50, min_length=14)
    """

    def __init__(self, workers: Optional[int] = None,
                 source_factory: SourceFactory = SecureRandom,
                 max_iterations: Optional[int] = None):
        if workers is None:
            workers = get_int_setting("parallel.workers", 4)
        if workers < 1:
            raise ValueError(f"workers must be positive, got {workers}")
        self.workers = workers
        self.source_factory = source_factory
        self.max_iterations = max_iterations
        self._local = threading.local()

    def _builder(self) -> PasswordBuilder:
        builder = getattr(self._local, 'builder', None)
        if builder is None:
            builder = PasswordBuilder(self.source_factory(), max_iterations=self.max_iterations)
            self._local.builder = builder
        return builder

    def _build_one(self, min_length: int) -> GenerationResult:
        return self._builder().build(min_length)

    def generate(self, count: int, min_length: int) -> List[GenerationResult]:
        """
        Generate count passwords.

        Returns:
            Results in submission order

        Raises:
            ValueError: If count is negative
            RandomSourceUnavailable: If source_factory cannot build a source
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return []

        logger.debug(f"Generating {count} passwords with {self.workers} workers")
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(self._build_one, min_length) for _ in range(count)]
            results = [future.result() for future in futures]
        logger.debug(f"Generated {len(results)} passwords")
        return results


def generate_batch(count: int, min_length: int,
                   workers: Optional[int] = None,
                   source_factory: SourceFactory = SecureRandom) -> List[GenerationResult]:
    """Generate count passwords in parallel; see BatchGenerator."""
    return BatchGenerator(workers=workers, source_factory=source_factory).generate(count, min_length)


__all__ = [
    'BatchGenerator',
    'generate_batch',
]
