"""Pydantic request/response models for the API."""

from .search import CompletenessResponse, ErrorResponse, SearchResponse

__all__ = [
    "CompletenessResponse",
    "ErrorResponse",
    "SearchResponse",
]
