"""Randomizer: every sampling operation bound to one RandomSource."""

from __future__ import annotations

from typing import TYPE_CHECKING

from klaw_sampling._config import create_source
from klaw_sampling.reservoir import reservoir_sample
from klaw_sampling.selection import random_element, try_random_element
from klaw_sampling.shuffle import shuffle, shuffle_in_place
from klaw_sampling.weighted import (
    try_weighted_random_element,
    weighted_random_element,
    weighted_random_elements,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, MutableSequence

    from klaw_sampling._config import SourceKind
    from klaw_sampling.errors import EmptySequence, InvalidWeight
    from klaw_sampling.result import Result
    from klaw_sampling.source import RandomSource

__all__ = ['Randomizer']


class Randomizer:
    """Sampling operations sharing one caller-owned `RandomSource`.

    A Randomizer adds no state of its own; two Randomizers over the same
    source interleave draws from it. Like the source, it is not safe for
    concurrent use without external locking.

    Example:
        ```python
        rnd = Randomizer(StdlibSource(random.Random(7)))
        hand = list(rnd.reservoir_sample(deck, 5))
        winner = rnd.weighted_random_element(players, lambda p: p.tickets)
        ```
    """

    __slots__ = ('_source',)

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    @classmethod
    def from_config(cls, kind: SourceKind | str | None = None, seed: int | None = None) -> Randomizer:
        """Build a Randomizer over a fresh source from `create_source`."""
        return cls(create_source(kind, seed))

    @property
    def source(self) -> RandomSource:
        return self._source

    def shuffle_in_place[T](self, seq: MutableSequence[T]) -> None:
        shuffle_in_place(seq, self._source)

    def shuffle[T](self, source: Iterable[T]) -> Iterator[T]:
        return shuffle(source, self._source)

    def reservoir_sample[T](self, source: Iterable[T], k: int) -> Iterator[T]:
        return reservoir_sample(source, k, self._source)

    def random_element[T](self, source: Iterable[T]) -> T:
        return random_element(source, self._source)

    def try_random_element[T](self, source: Iterable[T]) -> Result[T, EmptySequence]:
        return try_random_element(source, self._source)

    def weighted_random_element[T](self, source: Iterable[T], weight_fn: Callable[[T], float]) -> T:
        return weighted_random_element(source, weight_fn, self._source)

    def try_weighted_random_element[T](
        self, source: Iterable[T], weight_fn: Callable[[T], float]
    ) -> Result[T, EmptySequence | InvalidWeight]:
        return try_weighted_random_element(source, weight_fn, self._source)

    def weighted_random_elements[T](
        self,
        source: Iterable[T],
        weight_fn: Callable[[T], float],
        count: int,
        *,
        replacement: bool = True,
    ) -> Iterator[T]:
        return weighted_random_elements(source, weight_fn, count, self._source, replacement=replacement)

    def __repr__(self) -> str:
        return f'Randomizer({self._source!r})'
