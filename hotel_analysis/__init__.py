"""
Hotel Booking Analysis.

Modules:
- data: Row parsing and dataset loading
- analytics: Grouping, min-max scoring and rankings
- report: Human-readable report lines
- cli: Command-line front end
"""
