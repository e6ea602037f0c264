"""Grouping, scoring and ranking of hotel bookings."""
from .grouping import (
    GroupStats,
    HotelKey,
    hotel_key,
    group_by,
    group_and_aggregate,
    records_to_frame,
)
from .scoring import (
    NEUTRAL_SCORE,
    ValueRange,
    Criterion,
    value_range,
    score,
    score_values,
    composite_score,
    find_max_by,
    find_min_by,
)
from .ranking import (
    RankingConfig,
    CategoryCount,
    FeatureScore,
    HotelRanking,
    AnalysisResult,
    most_frequent_category,
    most_booked_country,
    rank_by_criteria,
    most_economical_hotel,
    most_profitable_hotel,
    run_analysis,
)
