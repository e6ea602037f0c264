"""
Command-line front end.

Usage:
    hotel-analysis Hotel_Dataset.csv
    hotel-analysis data.csv --delimiter ';' --verbose
"""

import argparse
import logging
from typing import List, Optional

from hotel_analysis.data.loader import BookingLoader, LoaderConfig
from hotel_analysis.data.parser import MIN_COLUMNS, DEFAULT_DELIMITER
from hotel_analysis.analytics.ranking import run_analysis
from hotel_analysis.report import print_report

DEFAULT_DATASET = 'Hotel_Dataset.csv'

EXIT_OK = 0
EXIT_NO_DATA = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Analyze hotel booking data')
    parser.add_argument('path', nargs='?', default=DEFAULT_DATASET,
                        help=f'Path to the booking dataset (default: {DEFAULT_DATASET})')
    parser.add_argument('--delimiter', type=str, default=DEFAULT_DELIMITER, help='Field delimiter')
    parser.add_argument('--min-columns', type=int, default=MIN_COLUMNS,
                        help='Minimum number of fields in a data row')
    parser.add_argument('--verbose', action='store_true', help='Log every skipped row')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(message)s',
    )

    config = LoaderConfig(
        delimiter=args.delimiter,
        min_columns=args.min_columns,
        verbose=args.verbose,
    )
    records = BookingLoader(config).load(args.path)

    result = run_analysis(records)
    print_report(result)

    return EXIT_NO_DATA if result.is_empty else EXIT_OK
