"""Fisher-Yates shuffles: in place and copying."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, MutableSequence

    from klaw_sampling.source import RandomSource

__all__ = ['shuffle', 'shuffle_in_place']


def shuffle_in_place[T](seq: MutableSequence[T], rng: RandomSource) -> None:
    """Shuffle ``seq`` in place into a uniformly random permutation.

    Walks from the last position down to 1, swapping each position with a
    uniformly chosen position at or before it. Uses n - 1 draws and O(1)
    extra memory; sequences of length 0 or 1 are left untouched.

    Args:
        seq: Mutable random-access sequence.
        rng: Source of the index draws.

    Example:
        ```python
        cards = list(range(52))
        shuffle_in_place(cards, rng)
        ```
    """
    for i in range(len(seq) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        seq[i], seq[j] = seq[j], seq[i]


def shuffle[T](source: Iterable[T], rng: RandomSource) -> Iterator[T]:
    """Return a one-shot iterator over the elements of ``source`` in random order.

    The input is copied into a list and shuffled before this function returns,
    so the whole permutation exists before the first element is yielded.
    ``source`` itself is never mutated.
    """
    buffer = list(source)
    shuffle_in_place(buffer, rng)
    return iter(buffer)
