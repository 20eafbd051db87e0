"""
Ranking: filter, score each survivor, sort.

Order is score.total descending; equal totals are ordered by worker id
ascending so the same pool and criteria always give the same list. No limit
is applied here.
"""

import logging
from datetime import date
from typing import List, Optional

from ..models.config import RankingConfig, resolve_config
from ..models.criteria import SearchCriteria
from ..models.scoring import MatchDetails, SearchResult
from ..models.worker import WorkerRecord
from .completeness import is_profile_complete
from .filtering import filter_workers
from .scoring import experience_breakdown, score_worker

logger = logging.getLogger(__name__)


def build_search_result(
    worker: WorkerRecord,
    config: RankingConfig,
    as_of: Optional[date] = None,
) -> SearchResult:
    """Score one worker and attach the match details shown on the result card."""
    breakdown = experience_breakdown(worker, config, as_of)
    score = score_worker(worker, config, as_of, breakdown=breakdown)
    return SearchResult(
        worker=worker,
        score=score,
        match_details=MatchDetails(
            years_of_experience=round(sum(e.years for e in breakdown), 1),
            experience_breakdown=breakdown,
            is_profile_complete=is_profile_complete(worker),
            has_profile_picture=worker.has_profile_picture,
        ),
    )


def sort_results(results: List[SearchResult]) -> List[SearchResult]:
    """Sort by total score (descending), then worker id (ascending)."""
    return sorted(results, key=lambda r: (-r.score.total, r.worker.id))


def rank_workers(
    pool: List[WorkerRecord],
    criteria: SearchCriteria,
    config: Optional[RankingConfig] = None,
    as_of: Optional[date] = None,
) -> List[SearchResult]:
    """
    Rank a candidate pool against criteria.

    1) mandatory filters  2) score each survivor  3) sort with id tie-break
    """
    config = resolve_config(config)
    survivors = filter_workers(pool, criteria)
    results = [build_search_result(w, config, as_of) for w in survivors]
    ranked = sort_results(results)
    logger.debug("[ranking] ranked %d of %d workers", len(ranked), len(pool))
    return ranked
