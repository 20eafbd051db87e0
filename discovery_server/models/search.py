"""Search and profile Pydantic models for the API."""

from typing import Dict, List

from pydantic import BaseModel

from discovery.models.scoring import SearchResult


class SearchResponse(BaseModel):
    results: List[SearchResult]
    total: int


class CompletenessResponse(BaseModel):
    worker_id: str
    percentage: int
    is_complete: bool
    checklist: Dict[str, bool]


class ErrorResponse(BaseModel):
    error: str
    detail: str
    errors: List[str] = []
    retryable: bool = False
