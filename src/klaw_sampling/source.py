"""Random sources: the draw capability every sampling operation is given.

The algorithms never own or seed a generator. They receive a `RandomSource`
and use exactly two draws from it: a uniform float in [0, 1) and a uniform
integer in [0, bound).

Thread safety:
    Every draw advances the source's internal state. A source shared between
    threads is a data race unless the caller serializes access (an external
    lock) or gives each thread its own source.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

__all__ = ['RandomSource', 'StdlibSource', 'is_random_access']


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for the uniform draws used by the sampling algorithms."""

    def random(self) -> float:
        """Return a uniform float in [0.0, 1.0)."""
        ...

    def randbelow(self, bound: int) -> int:
        """Return a uniform integer in [0, bound).

        Args:
            bound: Exclusive upper bound, at least 1.
        """
        ...


class StdlibSource:
    """`RandomSource` backed by a `random.Random` instance.

    Pass a `random.SystemRandom` to draw from OS entropy, or a seeded
    `random.Random` for reproducible runs. Not safe for concurrent use.

    Example:
        ```python
        rng = StdlibSource(random.Random(1234))
        rng.randbelow(6)
        ```
    """

    __slots__ = ('_random',)

    def __init__(self, generator: random.Random | None = None) -> None:
        self._random = generator if generator is not None else random.Random()

    @property
    def generator(self) -> random.Random:
        """The wrapped generator."""
        return self._random

    def random(self) -> float:
        return self._random.random()

    def randbelow(self, bound: int) -> int:
        if bound < 1:
            msg = f'bound must be >= 1, got {bound}'
            raise ValueError(msg)
        return self._random.randrange(bound)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({type(self._random).__name__})'


def is_random_access(source: Any) -> bool:
    """Return True if ``source`` supports O(1) indexing and a known length.

    Lists, tuples, ranges and strings qualify; generators, sets, dicts and
    other plain iterables take the one-pass paths.
    """
    return isinstance(source, Sequence)
