"""
Worker Discovery API: FastAPI app factory.

Use: uvicorn discovery_server.app:app
Or:  from discovery_server import app
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from discovery.errors import DataSourceUnavailable, InvalidCriteria

from .config import get_config
from .models import ErrorResponse
from .routes import register_routes
from .state import AppState, set_state

logger = logging.getLogger(__name__)

# Seconds a client should wait before retrying a failed search.
RETRY_AFTER_SECONDS = 5


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map the discovery error taxonomy to HTTP responses."""

    @app.exception_handler(InvalidCriteria)
    async def _invalid_criteria(request: Request, exc: InvalidCriteria):
        logger.info("[api] rejected criteria: %s", exc.errors)
        body = ErrorResponse(error="invalid_criteria", detail=str(exc), errors=exc.errors)
        return JSONResponse(status_code=422, content=body.model_dump())

    @app.exception_handler(DataSourceUnavailable)
    async def _data_source_unavailable(request: Request, exc: DataSourceUnavailable):
        body = ErrorResponse(error="data_source_unavailable", detail=str(exc), retryable=True)
        return JSONResponse(
            status_code=503,
            content=body.model_dump(),
            headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
        )


def create_app(state: Optional[AppState] = None) -> FastAPI:
    """Build FastAPI app with CORS, routes, and error handlers. state overrides the global state."""
    configure_logging(get_config().log_level)
    if state is not None:
        set_state(state)
    app = FastAPI(
        title="Worker Discovery API",
        description="Filter available workers by hard requirements and rank them by profile quality",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)
    register_exception_handlers(app)
    return app


app = create_app()
