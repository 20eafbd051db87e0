"""
Pipeline orchestrator: one bulk read, decode, then filter/score/rank.

The main entry point is search_workers. Its only suspension point is the
store read; cancelling the awaiting task cancels that read, and no state
outlives the call.
"""

import asyncio
import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Union

from ..errors import DataSourceUnavailable
from ..models.config import RankingConfig, resolve_config
from ..models.criteria import SearchCriteria, ensure_criteria
from ..models.scoring import SearchResult
from ..models.worker import WorkerRecord
from ..schema import decode_workers
from ..store import WorkerStore
from .filtering import store_filters
from .ranking import rank_workers

logger = logging.getLogger(__name__)


async def _fetch_pool(store: WorkerStore, criteria: SearchCriteria) -> List[Dict[str, Any]]:
    """Bulk read with store-native predicates pushed down."""
    equals = store_filters(criteria)
    try:
        return await store.fetch_workers(equals)
    except asyncio.CancelledError:
        logger.info("[search] worker read cancelled")
        raise
    except Exception as e:
        logger.error("[search] worker read failed: %s: %s", type(e).__name__, e)
        raise DataSourceUnavailable(f"Failed to read workers: {e}") from e


def _decode_pool(docs: List[Dict[str, Any]]) -> List[WorkerRecord]:
    """Decode raw documents; malformed ones are logged and excluded."""
    pool, rejected = decode_workers(docs)
    if rejected:
        logger.warning("[search] excluded %d malformed worker records", len(rejected))
    return pool


async def search_workers(
    store: WorkerStore,
    criteria: Union[SearchCriteria, Mapping[str, Any], None],
    config: Optional[RankingConfig] = None,
    as_of: Optional[date] = None,
) -> List[SearchResult]:
    """
    Search workers (criteria check → bulk read → decode → rank).

    Raises:
        InvalidCriteria: before any read, when criteria hold unknown values.
        DataSourceUnavailable: the bulk read failed; no partial results.

    Zero matches return an empty list.
    """
    # Validate at the boundary (raises InvalidCriteria)
    criteria = ensure_criteria(criteria)
    config = resolve_config(config)
    logger.info("[search] starting worker search criteria=%s", criteria.model_dump(mode="json", exclude_defaults=True))

    docs = await _fetch_pool(store, criteria)
    pool = _decode_pool(docs)
    results = rank_workers(pool, criteria, config, as_of=as_of)

    logger.info("[search] completed: %d results from %d records", len(results), len(docs))
    return results
