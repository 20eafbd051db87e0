"""Shared utilities for date normalisation and experience spans."""

from .dates import DAYS_PER_YEAR, to_date, years_between

__all__ = [
    "DAYS_PER_YEAR",
    "to_date",
    "years_between",
]
