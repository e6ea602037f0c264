"""
Min-max normalization scoring.

Key principle: every feature is rescaled to 0-100 across the population.
- higher_is_better=True:  min -> 0,   max -> 100
- higher_is_better=False: min -> 100, max -> 0
- Degenerate range (min == max): every item gets NEUTRAL_SCORE (50.0)

Several feature scores are combined into a composite by (weighted) mean.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar('T')

NEUTRAL_SCORE = 50.0
MAX_SCORE = 100.0


@dataclass(frozen=True)
class ValueRange:
    """Population minimum and maximum of one feature."""
    min: float
    max: float

    @property
    def is_degenerate(self) -> bool:
        return self.min == self.max


@dataclass(frozen=True)
class Criterion:
    """One scored feature: how to read it and which direction wins."""
    name: str
    selector: Callable
    higher_is_better: bool
    weight: float = 1.0


def value_range(items: Iterable[T], selector: Callable[[T], float]) -> ValueRange:
    """
    Compute (min, max) of selector(item) in a single pass.

    Raises:
        ValueError: if items is empty
    """
    lo = hi = None
    for item in items:
        v = selector(item)
        if lo is None:
            lo = hi = v
        elif v < lo:
            lo = v
        elif v > hi:
            hi = v

    if lo is None:
        raise ValueError("value_range() requires at least one item")
    return ValueRange(lo, hi)


def score(value: float, lo: float, hi: float, higher_is_better: bool) -> float:
    """
    Normalize value into [0, 100] relative to the population range.

    Args:
        value: Feature value of one candidate
        lo: Population minimum
        hi: Population maximum
        higher_is_better: Direction of the feature

    Returns:
        Score in [0, 100]; NEUTRAL_SCORE when lo == hi
    """
    if lo == hi:
        return NEUTRAL_SCORE

    normalized = (value - lo) / (hi - lo) * MAX_SCORE
    return normalized if higher_is_better else MAX_SCORE - normalized


def score_values(
    values: Sequence[float],
    lo: float,
    hi: float,
    higher_is_better: bool
) -> np.ndarray:
    """Vectorized score() over an array of values."""
    values = np.asarray(values, dtype=float)
    if lo == hi:
        return np.full(values.shape, NEUTRAL_SCORE)

    normalized = (values - lo) / (hi - lo) * MAX_SCORE
    return normalized if higher_is_better else MAX_SCORE - normalized


def composite_score(
    scores: Sequence[float],
    weights: Optional[Sequence[float]] = None
) -> float:
    """
    Combine feature scores into one final score.

    Unweighted arithmetic mean unless weights are given.
    """
    if len(scores) == 0:
        raise ValueError("composite_score() requires at least one score")
    if weights is None:
        return float(sum(scores) / len(scores))
    return float(np.average(scores, weights=weights))


def find_max_by(items: Sequence[T], selector: Callable[[T], float]) -> T:
    """Item with the largest selector value; the first one wins ties."""
    if not items:
        raise ValueError("find_max_by() requires at least one item")
    return max(items, key=selector)


def find_min_by(items: Sequence[T], selector: Callable[[T], float]) -> T:
    """Item with the smallest selector value; the first one wins ties."""
    if not items:
        raise ValueError("find_min_by() requires at least one item")
    return min(items, key=selector)
