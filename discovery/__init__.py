"""
Worker Discovery: mandatory filters + soft-score ranking

Single entry point for the discovery package:
- models/: WorkerRecord, SearchCriteria, SearchResult, RankingConfig
- schema/: decode_worker (raw document → Ok | Err)
- stages/: filtering, completeness, scoring, ranking, orchestrator
- store: WorkerStore protocol implemented by discovery_server.services
"""

from .errors import DataSourceUnavailable, DiscoveryError, InvalidCriteria, MalformedRecord
from .models import (
    DEFAULT_CONFIG,
    RankingConfig,
    ScoreBreakdown,
    SearchCriteria,
    SearchResult,
    WorkerRecord,
)
from .schema import Err, Ok, decode_worker, decode_workers
from .stages import (
    completeness_checklist,
    filter_workers,
    profile_completeness,
    rank_workers,
    score_worker,
    search_workers,
)
from .store import Subscription, WorkerStore

__all__ = [
    "DEFAULT_CONFIG",
    "DataSourceUnavailable",
    "DiscoveryError",
    "Err",
    "InvalidCriteria",
    "MalformedRecord",
    "Ok",
    "RankingConfig",
    "ScoreBreakdown",
    "SearchCriteria",
    "SearchResult",
    "Subscription",
    "WorkerRecord",
    "WorkerStore",
    "completeness_checklist",
    "decode_worker",
    "decode_workers",
    "filter_workers",
    "profile_completeness",
    "rank_workers",
    "score_worker",
    "search_workers",
]
