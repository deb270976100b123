"""cusiptool — CUSIP validation and check-digit repair."""

__version__ = "0.1.0"
