"""
Scoring model: score breakdown and per-query search results.

Contains:
- ScoreBreakdown: the three soft-score components; total is always their sum
- ExperienceEntry, MatchDetails: explanation attached to each result
- SearchResult: one ranked worker (never persisted)
"""

from typing import List

from pydantic import BaseModel, ConfigDict, computed_field

from .worker import WorkerRecord


class ScoreBreakdown(BaseModel):
    """Soft-score components for one worker."""

    model_config = ConfigDict(frozen=True)

    experience: int = 0
    profile_picture: int = 0
    completeness: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.experience + self.profile_picture + self.completeness


class ExperienceEntry(BaseModel):
    """Experience aggregated per employer."""

    model_config = ConfigDict(frozen=True)

    company: str
    years: float
    points: int


class MatchDetails(BaseModel):
    """Why a worker ranked where it did."""

    model_config = ConfigDict(frozen=True)

    years_of_experience: float
    experience_breakdown: List[ExperienceEntry]
    is_profile_complete: bool
    has_profile_picture: bool


class SearchResult(BaseModel):
    """A worker that passed every mandatory filter, with its soft score."""

    model_config = ConfigDict(frozen=True)

    worker: WorkerRecord
    score: ScoreBreakdown
    match_details: MatchDetails
