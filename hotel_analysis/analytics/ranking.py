"""
Ranking queries over the booking dataset.

Three questions are answered:
1. Which destination country has the most bookings?
2. Which hotel is the most economical for the customer?
   (low price, high discount, low margin)
3. Which hotel is the most profitable for the business?
   (many visitors, high margin)

Margin points in opposite directions for 2 and 3: a low margin is good for the
customer, a high margin is good for the business.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, List, Optional, Sequence, TypeVar

from hotel_analysis.data.parser import BookingRecord
from hotel_analysis.analytics.grouping import GroupStats, group_by, group_and_aggregate
from hotel_analysis.analytics.scoring import (
    Criterion,
    composite_score,
    find_max_by,
    score_values,
    value_range,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


ECONOMICAL_CRITERIA = [
    Criterion('price', lambda g: g.avg_price, higher_is_better=False),
    Criterion('discount', lambda g: g.avg_discount, higher_is_better=True),
    Criterion('margin', lambda g: g.avg_margin, higher_is_better=False),
]

PROFITABLE_CRITERIA = [
    Criterion('visitors', lambda g: g.total_visitors, higher_is_better=True),
    Criterion('margin', lambda g: g.avg_margin, higher_is_better=True),
]


@dataclass
class RankingConfig:
    """Criteria used by the hotel rankings."""
    economical_criteria: List[Criterion] = field(default_factory=lambda: list(ECONOMICAL_CRITERIA))
    profitable_criteria: List[Criterion] = field(default_factory=lambda: list(PROFITABLE_CRITERIA))


@dataclass(frozen=True)
class CategoryCount:
    category: str
    count: int


@dataclass(frozen=True)
class FeatureScore:
    """Score of one candidate on one criterion, with the raw value behind it."""
    name: str
    value: float
    score: float
    higher_is_better: bool


@dataclass
class RankedCandidate(Generic[T]):
    item: T
    final_score: float
    components: Dict[str, FeatureScore]


@dataclass
class HotelRanking:
    """Winning hotel of a ranking query."""
    hotel: GroupStats
    final_score: float
    components: Dict[str, FeatureScore]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            **self.hotel.to_dict(),
            'final_score': self.final_score,
            'components': {
                name: {'value': c.value, 'score': c.score, 'higher_is_better': c.higher_is_better}
                for name, c in self.components.items()
            },
        }


@dataclass
class AnalysisResult:
    """Answers to all three questions; empty when there was no data."""
    n_records: int = 0
    n_hotels: int = 0
    top_country: Optional[CategoryCount] = None
    most_economical: Optional[HotelRanking] = None
    most_profitable: Optional[HotelRanking] = None

    @property
    def is_empty(self) -> bool:
        return self.n_records == 0


def most_frequent_category(
    items: Sequence[T],
    extractor: Callable[[T], str]
) -> CategoryCount:
    """
    Category with the largest number of items.

    Ties go to the category seen first in the input.

    Raises:
        ValueError: if items is empty
    """
    if not items:
        raise ValueError("most_frequent_category() requires at least one item")

    groups = group_by(items, extractor)
    category, members = find_max_by(list(groups.items()), lambda kv: len(kv[1]))
    return CategoryCount(category, len(members))


def most_booked_country(records: Sequence[BookingRecord]) -> CategoryCount:
    return most_frequent_category(records, lambda r: r.destination_country)


def rank_by_criteria(items: Sequence[T], criteria: Sequence[Criterion]) -> List[RankedCandidate]:
    """
    Score every item on every criterion and rank by composite score.

    Each criterion is min-max normalized across the whole population. The sort
    is stable, so items with equal final scores keep their input order.

    Args:
        items: Candidates to rank
        criteria: Features to score

    Returns:
        Candidates sorted by final score, best first

    Raises:
        ValueError: if items or criteria is empty, or criterion names repeat
    """
    if not items:
        raise ValueError("rank_by_criteria() requires at least one item")
    if not criteria:
        raise ValueError("rank_by_criteria() requires at least one criterion")
    names = [c.name for c in criteria]
    if len(set(names)) != len(names):
        raise ValueError(f"Criterion names must be unique, got {names}")

    per_criterion = {}
    for c in criteria:
        values = [c.selector(item) for item in items]
        rng = value_range(values, lambda v: v)
        per_criterion[c.name] = (values, score_values(values, rng.min, rng.max, c.higher_is_better))

    weights = [c.weight for c in criteria]
    if len(set(weights)) == 1:
        weights = None  # plain mean
    candidates = []
    for i, item in enumerate(items):
        components = {
            c.name: FeatureScore(
                name=c.name,
                value=float(per_criterion[c.name][0][i]),
                score=float(per_criterion[c.name][1][i]),
                higher_is_better=c.higher_is_better,
            )
            for c in criteria
        }
        scores = [components[c.name].score for c in criteria]
        candidates.append(RankedCandidate(item, composite_score(scores, weights), components))

    return sorted(candidates, key=lambda rc: rc.final_score, reverse=True)


def _best_hotel(groups: Sequence[GroupStats], criteria: Sequence[Criterion]) -> HotelRanking:
    best = rank_by_criteria(groups, criteria)[0]
    return HotelRanking(best.item, best.final_score, best.components)


def most_economical_hotel(
    groups: Sequence[GroupStats],
    config: Optional[RankingConfig] = None
) -> HotelRanking:
    """Hotel with the best mix of low price, high discount and low margin."""
    config = config or RankingConfig()
    return _best_hotel(groups, config.economical_criteria)


def most_profitable_hotel(
    groups: Sequence[GroupStats],
    config: Optional[RankingConfig] = None
) -> HotelRanking:
    """Hotel with the best mix of visitor volume and high margin."""
    config = config or RankingConfig()
    return _best_hotel(groups, config.profitable_criteria)


def run_analysis(
    records: Sequence[BookingRecord],
    config: Optional[RankingConfig] = None
) -> AnalysisResult:
    """
    Answer all three questions for a loaded dataset.

    An empty dataset short-circuits to an empty AnalysisResult; no ranking is
    attempted.
    """
    if not records:
        logger.warning("No valid bookings to analyze")
        return AnalysisResult()

    config = config or RankingConfig()
    groups = group_and_aggregate(list(records))
    logger.info(f"Aggregated {len(records):,} bookings into {len(groups):,} hotels")

    return AnalysisResult(
        n_records=len(records),
        n_hotels=len(groups),
        top_country=most_booked_country(records),
        most_economical=most_economical_hotel(groups, config),
        most_profitable=most_profitable_hotel(groups, config),
    )
