"""
Error taxonomy for worker discovery.

- DataSourceUnavailable: the bulk worker read failed; fatal for the search.
- MalformedRecord: one stored record does not decode; excluded, never fatal.
- InvalidCriteria: caller supplied a value outside a closed vocabulary.

A search with zero matches is not an error.
"""

from typing import List, Optional


class DiscoveryError(Exception):
    """Base class for all worker discovery errors."""


class DataSourceUnavailable(DiscoveryError):
    """The record store could not be read. Callers may retry."""

    retryable = True

    def __init__(self, message: str = "Worker record store is unavailable"):
        super().__init__(message)


class MalformedRecord(DiscoveryError):
    """A raw worker record failed decoding."""

    def __init__(self, record_id: Optional[str], reasons: List[str]):
        self.record_id = record_id
        self.reasons = list(reasons)
        super().__init__(f"Malformed worker record {record_id!r}: {'; '.join(self.reasons)}")


class InvalidCriteria(DiscoveryError):
    """Search criteria rejected before the pipeline runs."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid search criteria: {'; '.join(self.errors)}")
