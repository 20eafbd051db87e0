"""Pipeline stages: filtering, completeness, scoring, ranking, orchestration."""

from .completeness import PROFILE_CHECKLIST, completeness_checklist, is_profile_complete, profile_completeness
from .filtering import MANDATORY_FILTERS, filter_workers, store_filters
from .orchestrator import search_workers
from .ranking import build_search_result, rank_workers, sort_results
from .scoring import experience_breakdown, score_worker

__all__ = [
    "MANDATORY_FILTERS",
    "PROFILE_CHECKLIST",
    "build_search_result",
    "completeness_checklist",
    "experience_breakdown",
    "filter_workers",
    "is_profile_complete",
    "profile_completeness",
    "rank_workers",
    "score_worker",
    "search_workers",
    "sort_results",
    "store_filters",
]
