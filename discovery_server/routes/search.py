"""Worker search endpoint."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body

from discovery.stages.orchestrator import search_workers

from ..models import SearchResponse
from ..state import get_state

router = APIRouter()


@router.post("", response_model=SearchResponse)
async def search(criteria: Optional[Dict[str, Any]] = Body(None)):
    """
    Filter available workers by the request criteria and rank them.

    The body is validated by SearchCriteria, so camelCase keys (workArea,
    contractType) are accepted and unknown keys are rejected. InvalidCriteria
    and DataSourceUnavailable are turned into 422 and 503 by the app's
    exception handlers; zero matches is a 200 with no results.
    """
    state = get_state()
    results = await search_workers(state.store, criteria, state.ranking_config)
    return SearchResponse(results=results, total=len(results))
