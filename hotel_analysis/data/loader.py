"""
Dataset loading for the hotel booking analysis.

Reads the delimited file line by line, skips the header and keeps only the
rows the parser accepts. File-level failures are logged once and yield an
empty list; they never propagate to the caller.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .parser import (
    BookingRecord,
    RowParseError,
    parse_row,
    MIN_COLUMNS,
    DEFAULT_DELIMITER,
)

logger = logging.getLogger(__name__)


@dataclass
class LoaderConfig:
    """
    Configuration for reading the booking file.

    Decoding is lossy by default: malformed or unmappable bytes are replaced
    rather than raising.
    """
    encoding: str = 'utf-8'
    decode_errors: str = 'replace'  # passed to open(errors=...)
    delimiter: str = DEFAULT_DELIMITER
    min_columns: int = MIN_COLUMNS
    skip_header: bool = True  # first line dropped without inspection

    # Logging
    verbose: bool = False  # log each rejected row at DEBUG


class BookingLoader:
    """
    Loads BookingRecords from a delimited file.

    Usage:
        loader = BookingLoader(LoaderConfig(delimiter=';'))
        records = loader.load('Hotel_Dataset.csv')
        print(loader.stats['rows_skipped'])
    """

    def __init__(self, config: Optional[LoaderConfig] = None):
        self.config = config or LoaderConfig()
        self.stats = {}

    def _reset_stats(self) -> None:
        self.stats = {
            'lines_read': 0,
            'rows_loaded': 0,
            'rows_skipped': 0,
            'skipped_by_kind': {},
            'file_error': None,
        }

    def read_lines(self, path: Union[str, Path]) -> List[str]:
        """Read every line of the file, decoding per the config."""
        with open(path, 'r', encoding=self.config.encoding,
                  errors=self.config.decode_errors) as f:
            return [line.rstrip('\n') for line in f]

    def load(self, path: Union[str, Path]) -> List[BookingRecord]:
        """
        Load and parse the booking file.

        Args:
            path: Path to the delimited dataset

        Returns:
            Records for every row that parsed; empty if the file is unreadable
        """
        self._reset_stats()

        try:
            lines = self.read_lines(path)
        except (OSError, UnicodeDecodeError) as e:
            self.stats['file_error'] = str(e)
            logger.error(f"CRITICAL ERROR: Could not read file '{path}'. {e}")
            return []

        self.stats['lines_read'] = len(lines)
        records = self.parse_lines(lines)

        logger.info(
            f"Loaded {len(records):,} bookings from {path} "
            f"({self.stats['rows_skipped']:,} rows skipped)"
        )
        return records

    def parse_lines(self, lines: List[str]) -> List[BookingRecord]:
        """Parse data lines, dropping the header and any rejected rows."""
        data_lines = lines[1:] if self.config.skip_header else lines

        records = []
        skipped = Counter()
        for line in data_lines:
            result = parse_row(line, self.config.min_columns, self.config.delimiter)
            if isinstance(result, RowParseError):
                skipped[result.kind.value] += 1
                if self.config.verbose:
                    logger.debug(f"  • Skipped row ({result.kind.value}): {result.message}")
                continue
            records.append(result)

        self.stats['rows_loaded'] = len(records)
        self.stats['rows_skipped'] = sum(skipped.values())
        self.stats['skipped_by_kind'] = dict(skipped)
        return records


def load_booking_data(
    path: Union[str, Path],
    config: Optional[LoaderConfig] = None
) -> List[BookingRecord]:
    """
    Load booking records with standard settings.

    Args:
        path: Path to the delimited dataset
        config: Optional loader configuration

    Returns:
        List of parsed BookingRecords (possibly empty)
    """
    return BookingLoader(config).load(path)
