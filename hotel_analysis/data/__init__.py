"""Data loading and row parsing utilities."""
from .parser import (
    BookingRecord,
    RowParseError,
    ParseErrorKind,
    parse_row,
    parse_number,
    parse_discount,
    is_parse_error,
    COLUMNS,
    MIN_COLUMNS,
    REQUIRED_COLUMNS,
    UNKNOWN_CITY,
)
from .loader import BookingLoader, LoaderConfig, load_booking_data
