"""Root status endpoint."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    return {
        "status": "ok",
        "service": "worker-discovery",
        "data_source": state.config.data_source,
        "store": type(state.store).__name__,
    }
