"""Weighted random selection: one draw, and repeated draws with or without replacement.

All operations share the same weight contract: the weight function is called
exactly once per element, every weight must be a finite number >= 0, and a
draw picks element i with probability ``weight[i] / total``.

Draws use a cumulative-weight scan. A uniform ``r`` in [0, total) selects the
first element whose running total is strictly greater than ``r``, so an
element with weight 0 can never be selected. If floating-point rounding lets
``r`` reach the total, the last element with a positive weight is returned.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from itertools import accumulate
from typing import TYPE_CHECKING

from klaw_sampling._logging import get_logger
from klaw_sampling.errors import EmptySequence, EmptySequenceError, InvalidWeight, InvalidWeightError
from klaw_sampling.result import Err, Ok, Result
from klaw_sampling.source import is_random_access

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Sequence

    from klaw_sampling.source import RandomSource

__all__ = [
    'weighted_random_element',
    'weighted_random_elements',
    'try_weighted_random_element',
]

logger = get_logger(__name__)


def _materialize[T](source: Iterable[T]) -> Sequence[T]:
    return source if is_random_access(source) else list(source)  # type: ignore[return-value]


def _evaluate_weights[T](items: Sequence[T], weight_fn: Callable[[T], float]) -> list[float]:
    """Call ``weight_fn`` once per item, rejecting negative and non-finite weights."""
    weights: list[float] = []
    for index, item in enumerate(items):
        weight = float(weight_fn(item))
        if not math.isfinite(weight):
            logger.debug('weights.rejected', index=index, weight=weight, reason='not finite')
            raise InvalidWeightError('weight must be finite', index, weight)
        if weight < 0:
            logger.debug('weights.rejected', index=index, weight=weight, reason='negative')
            raise InvalidWeightError('weight must be >= 0', index, weight)
        weights.append(weight)
    return weights


class _CumulativeTable:
    """Prefix sums of a weight vector, for repeated O(log n) draws."""

    __slots__ = ('cumulative', 'last_positive', 'total')

    def __init__(self, weights: list[float]) -> None:
        self.cumulative = list(accumulate(weights))
        self.total = self.cumulative[-1] if self.cumulative else 0.0
        self.last_positive = next((i for i in range(len(weights) - 1, -1, -1) if weights[i] > 0), -1)

    def is_drawable(self) -> bool:
        return self.total > 0 and math.isfinite(self.total)

    def draw(self, rng: RandomSource) -> int:
        index = bisect_right(self.cumulative, rng.random() * self.total)
        if index > self.last_positive:
            # Rounding pushed the draw past the last positive weight.
            return self.last_positive
        return index


def _build_table[T](items: Sequence[T], weight_fn: Callable[[T], float]) -> _CumulativeTable:
    table = _CumulativeTable(_evaluate_weights(items, weight_fn))
    if not table.is_drawable():
        raise InvalidWeightError(f'total weight must be positive and finite, got {table.total!r}')
    return table


def weighted_random_element[T](
    source: Iterable[T],
    weight_fn: Callable[[T], float],
    rng: RandomSource,
) -> T:
    """Return one element of ``source`` with probability proportional to its weight.

    Args:
        source: Elements to choose from; materialized unless random-access.
        weight_fn: Maps an element to its weight. Called once per element.
        rng: Source of the draw.

    Raises:
        EmptySequenceError: If ``source`` has no elements.
        InvalidWeightError: If a weight is negative or not finite, or the
            total weight is not strictly positive.

    Example:
        ```python
        loot = [('common', 70), ('rare', 25), ('epic', 5)]
        name, _ = weighted_random_element(loot, lambda entry: entry[1], rng)
        ```
    """
    items = _materialize(source)
    if not items:
        raise EmptySequenceError('weighted_random_element')
    table = _build_table(items, weight_fn)
    return items[table.draw(rng)]


def try_weighted_random_element[T](
    source: Iterable[T],
    weight_fn: Callable[[T], float],
    rng: RandomSource,
) -> Result[T, EmptySequence | InvalidWeight]:
    """Like `weighted_random_element`, returning ``Err`` instead of raising."""
    try:
        return Ok(weighted_random_element(source, weight_fn, rng))
    except (EmptySequenceError, InvalidWeightError) as exc:
        return Err(exc.to_struct())


def weighted_random_elements[T](
    source: Iterable[T],
    weight_fn: Callable[[T], float],
    count: int,
    rng: RandomSource,
    *,
    replacement: bool = True,
) -> Iterator[T]:
    """Draw up to ``count`` elements with probability proportional to weight.

    The source is materialized and every weight evaluated and validated
    before this returns; the returned generator only performs the draws.

    With replacement, each draw is independent and ``count`` may exceed the
    number of elements. Without replacement, each drawn position is removed
    and the remaining weights renormalize through a shrinking total; at most
    ``min(count, n)`` elements are produced, fewer if the positive weight runs
    out first. No position is returned twice, though equal values held at
    different positions can be.

    An empty source or an all-zero weight vector produces no elements rather
    than an error.

    Args:
        source: Elements to choose from.
        weight_fn: Maps an element to its weight. Called once per element.
        count: Number of draws requested, at least 0.
        rng: Source of the draws.
        replacement: Whether a position may be drawn more than once.

    Raises:
        ValueError: If ``count`` is negative.
        InvalidWeightError: If a weight is negative or not finite, or the
            weights sum past the largest float.
    """
    if count < 0:
        msg = f'count must be >= 0, got {count}'
        raise ValueError(msg)

    items = _materialize(source)
    weights = _evaluate_weights(items, weight_fn)
    table = _CumulativeTable(weights)
    if not math.isfinite(table.total):
        raise InvalidWeightError(f'total weight must be finite, got {table.total!r}')

    if replacement:
        if count and table.total <= 0:
            logger.debug('weighted_random_elements.nothing_drawable', requested=count, total=table.total)
            return iter(())
        return _draw_with_replacement(items, table, count, rng)
    return _draw_without_replacement(items, weights, table.total, count, rng)


def _draw_with_replacement[T](
    items: Sequence[T],
    table: _CumulativeTable,
    count: int,
    rng: RandomSource,
) -> Iterator[T]:
    for _ in range(count):
        yield items[table.draw(rng)]


def _draw_without_replacement[T](
    items: Sequence[T],
    weights: list[float],
    total: float,
    count: int,
    rng: RandomSource,
) -> Iterator[T]:
    remaining = sum(1 for weight in weights if weight > 0)
    requested = min(count, len(items))

    for drawn in range(requested):
        if total <= 0 or not remaining:
            logger.debug(
                'weighted_random_elements.exhausted',
                requested=requested,
                drawn=drawn,
                total=total,
            )
            return

        target = rng.random() * total
        running = 0.0
        chosen = -1
        for index, weight in enumerate(weights):
            if weight <= 0:
                continue
            chosen = index
            running += weight
            if target < running:
                break

        yield items[chosen]

        total -= weights[chosen]
        weights[chosen] = 0.0
        remaining -= 1
        if not remaining:
            total = 0.0
        elif total <= 0:
            # Cancellation after removing a dominant weight; positive weight remains.
            total = math.fsum(weights)
