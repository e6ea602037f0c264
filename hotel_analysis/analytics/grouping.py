"""
Grouping and aggregation of booking records.

Hotels are identified by (destination_country, hotel_name, city). Each group is
summarized with mean price, mean discount, mean margin and total visitors.
"""

from dataclasses import dataclass, asdict
from typing import Callable, Dict, Hashable, Iterable, List, NamedTuple, TypeVar

import pandas as pd

from hotel_analysis.data.parser import BookingRecord

T = TypeVar('T')
K = TypeVar('K', bound=Hashable)


class HotelKey(NamedTuple):
    destination_country: str
    hotel_name: str
    city: str


KEY_COLUMNS = list(HotelKey._fields)


@dataclass(frozen=True)
class GroupStats:
    """Aggregate over all bookings of one hotel."""
    destination_country: str
    hotel_name: str
    city: str
    avg_price: float
    avg_discount: float
    avg_margin: float
    total_visitors: int
    n_bookings: int

    @property
    def key(self) -> HotelKey:
        return HotelKey(self.destination_country, self.hotel_name, self.city)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)


def hotel_key(record: BookingRecord) -> HotelKey:
    """Default group key: country, hotel and city."""
    return HotelKey(record.destination_country, record.hotel_name, record.city)


def group_by(items: Iterable[T], key_fn: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Partition items by key.

    Buckets keep the order in which keys (and items) were first seen, and no
    bucket is ever empty.
    """
    groups: Dict[K, List[T]] = {}
    for item in items:
        groups.setdefault(key_fn(item), []).append(item)
    return groups


def records_to_frame(records: List[BookingRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per booking."""
    columns = list(BookingRecord.__dataclass_fields__)
    return pd.DataFrame([r.to_dict() for r in records], columns=columns)


def group_and_aggregate(
    records: List[BookingRecord],
    key_fn: Callable[[BookingRecord], tuple] = hotel_key
) -> List[GroupStats]:
    """
    Aggregate bookings per hotel.

    Args:
        records: Parsed booking records
        key_fn: Returns a (country, hotel, city) triple for each record

    Returns:
        One GroupStats per distinct key, ordered by key. Empty input gives an
        empty list.
    """
    if not records:
        return []

    keys = pd.DataFrame([tuple(key_fn(r)) for r in records], columns=KEY_COLUMNS)
    values = records_to_frame(records)[['booking_price', 'discount', 'profit_margin', 'visitors']]
    df = pd.concat([keys, values], axis=1)

    stats = df.groupby(KEY_COLUMNS, sort=True).agg(
        avg_price=('booking_price', 'mean'),
        avg_discount=('discount', 'mean'),
        avg_margin=('profit_margin', 'mean'),
        total_visitors=('visitors', 'sum'),
        n_bookings=('visitors', 'size'),
    ).reset_index()

    return [
        GroupStats(
            destination_country=row.destination_country,
            hotel_name=row.hotel_name,
            city=row.city,
            avg_price=float(row.avg_price),
            avg_discount=float(row.avg_discount),
            avg_margin=float(row.avg_margin),
            total_visitors=int(row.total_visitors),
            n_bookings=int(row.n_bookings),
        )
        for row in stats.itertuples(index=False)
    ]
