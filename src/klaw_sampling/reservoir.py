"""Reservoir sampling of k items from a single-pass source (Algorithm L).

Algorithm L skips over the items that will not enter the reservoir: after the
reservoir is full, the gap to the next replacement is drawn from a geometric
distribution whose parameter ``w`` shrinks as the stream grows. A stream of n
items therefore costs O(k * log(n / k)) draws instead of one draw per item.

References:
    Li, K.-H. (1994). Reservoir-sampling algorithms of time complexity
    O(n(1 + log(N/n))). ACM Transactions on Mathematical Software 20(4).
"""

from __future__ import annotations

import math
from itertools import islice
from typing import TYPE_CHECKING

from klaw_sampling._logging import get_logger
from klaw_sampling.shuffle import shuffle_in_place

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from klaw_sampling.source import RandomSource

__all__ = ['reservoir_sample']

logger = get_logger(__name__)


def _open_uniform(rng: RandomSource) -> float:
    """Draw a uniform float strictly inside (0, 1)."""
    u = rng.random()
    while u <= 0.0:
        u = rng.random()
    return u


def _weight_factor(rng: RandomSource, k: int) -> float:
    """Draw one ``exp(log(U) / k)`` factor, the k-th root of a uniform."""
    return math.exp(math.log(_open_uniform(rng)) / k)


def _gap(rng: RandomSource, w: float) -> float:
    """Number of items to skip before the next replacement.

    Returns an int, or ``math.inf`` once ``w`` has underflowed to zero and no
    further replacement can happen.
    """
    if w <= 0.0:
        return math.inf
    if w >= 1.0:
        return 0
    skip = math.log(_open_uniform(rng)) / math.log1p(-w)
    return math.floor(skip) if math.isfinite(skip) else math.inf


def reservoir_sample[T](source: Iterable[T], k: int, rng: RandomSource) -> Iterator[T]:
    """Uniformly sample ``min(k, n)`` items from ``source`` in one pass.

    Every subset of that size is equally likely, and the returned order is
    itself random. The source is consumed completely (unless ``k`` is 0),
    and only the reservoir of at most ``k`` items is held in memory.

    Args:
        source: Any iterable; iterated once.
        k: Sample size, at least 0.
        rng: Source of the draws.

    Returns:
        A one-shot iterator over the sample, computed before this returns.

    Raises:
        ValueError: If ``k`` is negative.

    Example:
        ```python
        with open('access.log') as f:
            lines = list(reservoir_sample(f, 100, rng))
        ```
    """
    if k < 0:
        msg = f'k must be >= 0, got {k}'
        raise ValueError(msg)
    if k == 0:
        return iter(())

    iterator = iter(source)
    reservoir = list(islice(iterator, k))
    if len(reservoir) < k:
        shuffle_in_place(reservoir, rng)
        return iter(reservoir)

    w = _weight_factor(rng, k)
    next_index = k + _gap(rng, w)
    position = k - 1
    replacements = 0

    for position, item in enumerate(iterator, start=k):
        if position == next_index:
            reservoir[rng.randbelow(k)] = item
            replacements += 1
            w *= _weight_factor(rng, k)
            next_index += _gap(rng, w) + 1

    logger.debug('reservoir_sample.complete', k=k, seen=position + 1, replacements=replacements)

    # Fill order is source order, so the reservoir is shuffled before returning.
    shuffle_in_place(reservoir, rng)
    return iter(reservoir)
