"""
Row parsing for the hotel booking dataset.

Each raw line is split on the delimiter and mapped to a BookingRecord using
fixed column offsets. Rows that cannot be parsed come back as a RowParseError
value instead of raising, so the loader can filter them in one place.

Discount rule (kept exactly as found in the data):
- "20%" -> 0.20 (percent marker stripped, divided by 100)
- "20"  -> 20.0 (bare value taken as already being a fraction)
"""

import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Union


# Column offsets in the reference dataset layout
COLUMNS = {
    'booking_id': 0,
    'customer_origin': 6,
    'destination_country': 9,
    'city': 10,
    'visitors': 11,
    'hotel_name': 16,
    'booking_price': 20,
    'discount': 21,
    'profit_margin': 23,
}

MIN_COLUMNS = 24

# Smallest row holding every fixed offset (city is optional)
REQUIRED_COLUMNS = max(idx for name, idx in COLUMNS.items() if name != 'city') + 1
DEFAULT_DELIMITER = ','
UNKNOWN_CITY = 'Unknown'
PERCENT_MARKER = '%'


class ParseErrorKind(Enum):
    """Why a row was rejected."""
    INCOMPLETE_ROW = "incomplete_row"
    NUMERIC_PARSE = "numeric_parse"


@dataclass(frozen=True)
class BookingRecord:
    """One booking row."""
    booking_id: str
    customer_origin: str
    destination_country: str
    city: str
    hotel_name: str
    booking_price: float
    discount: float
    profit_margin: float
    visitors: int

    @property
    def calculated_profit(self) -> float:
        """Profit earned on this booking (price x margin)."""
        return self.booking_price * self.profit_margin

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)


@dataclass(frozen=True)
class RowParseError:
    """A rejected row. Returned, never raised."""
    kind: ParseErrorKind
    message: str
    line: str = ""


ParseResult = Union[BookingRecord, RowParseError]


def is_parse_error(result: ParseResult) -> bool:
    return isinstance(result, RowParseError)


def parse_number(raw: str) -> float:
    """Parse a finite float. Raises ValueError for text, nan and inf."""
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value: {raw!r}")
    return value


def parse_discount(raw: str) -> float:
    """
    Parse a discount field.

    A field carrying a percent marker is a percentage; anything else is used
    as-is. Raises ValueError if the remaining text is not a number.
    """
    value = parse_number(raw.replace(PERCENT_MARKER, ''))
    if PERCENT_MARKER in raw:
        return value / 100
    return value


def parse_row(
    raw_line: str,
    min_columns: int = MIN_COLUMNS,
    delimiter: str = DEFAULT_DELIMITER
) -> ParseResult:
    """
    Convert one raw line into a BookingRecord.

    Args:
        raw_line: Line from the dataset (without or with trailing newline)
        min_columns: Minimum number of fields a data row must have; never
            lower than REQUIRED_COLUMNS
        delimiter: Field separator

    Returns:
        BookingRecord on success, RowParseError otherwise
    """
    cols = [c.strip() for c in raw_line.split(delimiter)]
    required = max(min_columns, REQUIRED_COLUMNS)

    if len(cols) < required:
        return RowParseError(
            ParseErrorKind.INCOMPLETE_ROW,
            f"Incomplete row: {len(cols)} fields, expected at least {required}",
            raw_line,
        )

    try:
        price = parse_number(cols[COLUMNS['booking_price']])
        discount = parse_discount(cols[COLUMNS['discount']])
        margin = parse_number(cols[COLUMNS['profit_margin']])
        visitors = int(cols[COLUMNS['visitors']])
    except ValueError as e:
        return RowParseError(ParseErrorKind.NUMERIC_PARSE, str(e), raw_line)

    city_idx = COLUMNS['city']
    city = cols[city_idx] if len(cols) > city_idx and cols[city_idx] else UNKNOWN_CITY

    return BookingRecord(
        booking_id=cols[COLUMNS['booking_id']],
        customer_origin=cols[COLUMNS['customer_origin']],
        destination_country=cols[COLUMNS['destination_country']],
        city=city,
        hotel_name=cols[COLUMNS['hotel_name']],
        booking_price=price,
        discount=discount,
        profit_margin=margin,
        visitors=visitors,
    )
