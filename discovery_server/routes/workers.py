"""Worker profile endpoints."""

from fastapi import APIRouter, HTTPException

from discovery.schema import Ok, decode_worker
from discovery.stages.completeness import completeness_checklist, profile_completeness

from ..models import CompletenessResponse
from ..state import get_state

router = APIRouter()


@router.get("/{worker_id}/completeness", response_model=CompletenessResponse)
def get_completeness(worker_id: str):
    """Profile completion for the worker dashboard indicator."""
    state = get_state()
    doc = state.store.get_worker(worker_id)
    if doc is None:
        raise HTTPException(status_code=404, detail="Worker not found")
    result = decode_worker(doc)
    if not isinstance(result, Ok):
        raise HTTPException(status_code=422, detail=str(result.error))
    worker = result.value
    percentage = profile_completeness(worker)
    return CompletenessResponse(
        worker_id=worker.id,
        percentage=percentage,
        is_complete=percentage == 100,
        checklist=completeness_checklist(worker),
    )
