#!/usr/bin/env python
"""
Run the hotel booking analysis report.

Usage:
    python entrypoint/analyze.py                      # Hotel_Dataset.csv
    python entrypoint/analyze.py data/bookings.csv
    python entrypoint/analyze.py data.csv --verbose   # Log skipped rows
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hotel_analysis.cli import main


if __name__ == "__main__":
    sys.exit(main())
