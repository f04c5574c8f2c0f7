"""Uniform selection of a single element."""

from __future__ import annotations

from typing import TYPE_CHECKING

from klaw_sampling.errors import EmptySequence, EmptySequenceError
from klaw_sampling.result import Err, Ok, Result
from klaw_sampling.source import is_random_access

if TYPE_CHECKING:
    from collections.abc import Iterable

    from klaw_sampling.source import RandomSource

__all__ = ['random_element', 'try_random_element']


def random_element[T](source: Iterable[T], rng: RandomSource) -> T:
    """Return one element of ``source``, each with probability 1/n.

    Random-access sources are indexed directly with a single draw. Any other
    iterable is read once, keeping the i-th element with probability 1/i
    (a reservoir of one), so memory stays O(1) for streams of any length.

    Raises:
        EmptySequenceError: If ``source`` has no elements.

    Example:
        ```python
        random_element(['rock', 'paper', 'scissors'], rng)
        random_element(line for line in open('words.txt'))
        ```
    """
    if is_random_access(source):
        if not source:
            raise EmptySequenceError('random_element')
        return source[rng.randbelow(len(source))]

    iterator = iter(source)
    try:
        picked = next(iterator)
    except StopIteration:
        raise EmptySequenceError('random_element') from None

    for seen, item in enumerate(iterator, start=2):
        if rng.randbelow(seen) == 0:
            picked = item
    return picked


def try_random_element[T](source: Iterable[T], rng: RandomSource) -> Result[T, EmptySequence]:
    """Like `random_element`, returning ``Err(EmptySequence)`` instead of raising.

    Example:
        ```python
        match try_random_element(queue, rng):
            case Ok(item): handle(item)
            case Err(EmptySequence()): idle()
        ```
    """
    try:
        return Ok(random_element(source, rng))
    except EmptySequenceError as exc:
        return Err(exc.to_struct())
