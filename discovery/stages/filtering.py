"""
Filter stage: mandatory filters.

Eliminates every worker that fails a hard requirement. Filters: availability
(always), job, work area, languages (all required), gender, contract type.
The result is a pure intersection, so predicate order never changes it.

Availability is the one predicate handed to the record store, through
store_filters. Vocabulary fields are matched case-insensitively, which a
store equality query cannot express, so they are filtered in process.

The public entry points are filter_workers and store_filters.
"""

import logging
from typing import Any, Callable, Dict, List, Tuple

from ..models.criteria import SearchCriteria
from ..models.worker import WorkerRecord

logger = logging.getLogger(__name__)


def _fold(value: Any) -> str:
    """Case-insensitive comparison key for a vocabulary term."""
    return str(getattr(value, "value", value)).casefold()


def _is_available(worker: WorkerRecord, criteria: SearchCriteria) -> bool:
    """True if the worker is currently available. Not controlled by criteria."""
    return worker.availability is True


def _matches_job(worker: WorkerRecord, criteria: SearchCriteria) -> bool:
    """True if no job is required or the worker's job matches it."""
    if criteria.job is None:
        return True
    return worker.job is not None and _fold(worker.job) == _fold(criteria.job)


def _matches_work_area(worker: WorkerRecord, criteria: SearchCriteria) -> bool:
    """True if no area is required or the area is one of the worker's areas."""
    if criteria.work_area is None:
        return True
    wanted = _fold(criteria.work_area)
    return any(_fold(area) == wanted for area in worker.work_areas)


def _speaks_all_languages(worker: WorkerRecord, criteria: SearchCriteria) -> bool:
    """True if the worker speaks every required language."""
    if not criteria.languages:
        return True
    spoken = {_fold(lang) for lang in worker.languages}
    return all(_fold(lang) in spoken for lang in criteria.languages)


def _matches_gender(worker: WorkerRecord, criteria: SearchCriteria) -> bool:
    return criteria.gender is None or worker.gender == criteria.gender


def _matches_contract_type(worker: WorkerRecord, criteria: SearchCriteria) -> bool:
    return criteria.contract_type is None or worker.contract_type == criteria.contract_type


MANDATORY_FILTERS: Tuple[Tuple[str, Callable[[WorkerRecord, SearchCriteria], bool]], ...] = (
    ("availability", _is_available),
    ("job", _matches_job),
    ("work_area", _matches_work_area),
    ("languages", _speaks_all_languages),
    ("gender", _matches_gender),
    ("contract_type", _matches_contract_type),
)


def filter_workers(
    pool: List[WorkerRecord],
    criteria: SearchCriteria,
) -> List[WorkerRecord]:
    """
    Return workers from pool that satisfy every mandatory filter.

    Output keeps input order and is always a subset of pool. Empty criteria
    keep every available worker; an empty pool gives an empty list.
    """
    workers = list(pool)
    logger.debug("[filter] initial workers count: %d", len(workers))
    for name, predicate in MANDATORY_FILTERS:
        workers = [w for w in workers if predicate(w, criteria)]
        logger.debug("[filter] after %s filter: %d", name, len(workers))
    return workers


def store_filters(criteria: SearchCriteria) -> Dict[str, Any]:
    """
    Equality predicates the record store can evaluate natively.

    Only availability is pushed down. Stored job and gender values may use any
    casing, so an exact-match query on them could drop workers that
    filter_workers would keep.
    """
    return {"availability_status": True}
