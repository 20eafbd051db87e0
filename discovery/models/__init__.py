"""Data models for worker discovery."""

from .config import DEFAULT_CONFIG, RankingConfig, resolve_config
from .criteria import SearchCriteria, ensure_criteria
from .scoring import ExperienceEntry, MatchDetails, ScoreBreakdown, SearchResult
from .vocabulary import ContractType, Gender, JobType, Language, WorkArea
from .worker import Education, WorkExperience, WorkerRecord

__all__ = [
    "DEFAULT_CONFIG",
    "ContractType",
    "Education",
    "ExperienceEntry",
    "Gender",
    "JobType",
    "Language",
    "MatchDetails",
    "RankingConfig",
    "ScoreBreakdown",
    "SearchCriteria",
    "SearchResult",
    "WorkArea",
    "WorkExperience",
    "WorkerRecord",
    "ensure_criteria",
    "resolve_config",
]
