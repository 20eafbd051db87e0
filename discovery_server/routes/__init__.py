"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .root import router as root_router
from .search import router as search_router
from .workers import router as workers_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(search_router, prefix="/api/search", tags=["search"])
    app.include_router(workers_router, prefix="/api/workers", tags=["workers"])
