"""Injectable randomness for the generator.

Anything with choice() and shuffle() works; random.Random and
secrets.SystemRandom both qualify.
"""

from __future__ import annotations

import random
import secrets
from typing import MutableSequence, Optional, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T: ...

    def shuffle(self, x: MutableSequence) -> None: ...


def system() -> RandomSource:
    """Cryptographically secure source backed by os.urandom."""
    return secrets.SystemRandom()


def seeded(seed: Optional[int] = None) -> RandomSource:
    """Deterministic pseudo-random source, for tests and reproducible runs."""
    return random.Random(seed)
