"""
Shared pytest fixtures for the parser, loader and analytics tests.
"""

import pytest

from hotel_analysis.data.parser import COLUMNS, MIN_COLUMNS, BookingRecord
from hotel_analysis.analytics.grouping import GroupStats

HEADER = ",".join(f"col_{i}" for i in range(MIN_COLUMNS))


def build_row(
    booking_id='B1',
    origin='Germany',
    country='France',
    city='Paris',
    visitors='2',
    hotel='Hotel X',
    price='100',
    discount='10%',
    margin='0.2',
    n_columns=MIN_COLUMNS,
    delimiter=',',
):
    """Build a raw data line in the reference column layout."""
    cols = ['x'] * n_columns
    values = {
        'booking_id': booking_id,
        'customer_origin': origin,
        'destination_country': country,
        'city': city,
        'visitors': visitors,
        'hotel_name': hotel,
        'booking_price': price,
        'discount': discount,
        'profit_margin': margin,
    }
    for name, idx in COLUMNS.items():
        if idx < n_columns:
            cols[idx] = str(values[name])
    return delimiter.join(cols)


@pytest.fixture
def make_row():
    """Factory for raw data lines."""
    return build_row


@pytest.fixture
def write_dataset(tmp_path):
    """Write a header plus data lines to a temporary CSV and return its path."""
    def _write(lines, header=HEADER, name='bookings.csv'):
        path = tmp_path / name
        content = "\n".join([header, *lines]) + "\n" if header is not None else "\n".join(lines)
        path.write_text(content, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def sample_records():
    """Six bookings across three hotels and two countries."""
    def rec(bid, country, city, hotel, price, discount, margin, visitors):
        return BookingRecord(
            booking_id=bid,
            customer_origin='Spain',
            destination_country=country,
            city=city,
            hotel_name=hotel,
            booking_price=price,
            discount=discount,
            profit_margin=margin,
            visitors=visitors,
        )

    return [
        rec('1', 'France', 'Paris', 'Le Grand', 200.0, 0.10, 0.30, 2),
        rec('2', 'France', 'Paris', 'Le Grand', 300.0, 0.20, 0.40, 3),
        rec('3', 'France', 'Nice', 'Azur Inn', 100.0, 0.25, 0.10, 1),
        rec('4', 'Italy', 'Rome', 'Roma Palace', 150.0, 0.05, 0.35, 10),
        rec('5', 'France', 'Nice', 'Azur Inn', 120.0, 0.15, 0.20, 2),
        rec('6', 'Italy', 'Rome', 'Roma Palace', 250.0, 0.05, 0.45, 8),
    ]


@pytest.fixture
def make_group():
    """Factory for GroupStats with neutral defaults."""
    def _make(hotel='Hotel X', country='France', city='Paris', avg_price=100.0,
              avg_discount=0.1, avg_margin=0.2, total_visitors=10, n_bookings=1):
        return GroupStats(
            destination_country=country,
            hotel_name=hotel,
            city=city,
            avg_price=avg_price,
            avg_discount=avg_discount,
            avg_margin=avg_margin,
            total_visitors=total_visitors,
            n_bookings=n_bookings,
        )
    return _make
