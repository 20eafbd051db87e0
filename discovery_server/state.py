"""Application state: worker store and ranking configuration."""

import logging
from typing import Optional

from discovery.models.config import RankingConfig
from discovery.store import WorkerStore

from .config import ServerConfig, get_config
from .services import FirestoreWorkerStore, InMemoryWorkerStore, JsonWorkerStore

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        store: Optional[WorkerStore] = None,
        ranking_config: Optional[RankingConfig] = None,
    ):
        self.config = config
        self.store: WorkerStore = store if store is not None else self._create_store(config)
        self.ranking_config = ranking_config if ranking_config is not None else config.load_ranking_config()
        logger.info("[startup] Worker store: %s", type(self.store).__name__)

    @staticmethod
    def _create_store(config: ServerConfig) -> WorkerStore:
        """Create the worker store for config.data_source."""
        ok, errors = config.validate()
        if not ok:
            raise ValueError("; ".join(errors))
        if config.data_source == "firebase":
            return FirestoreWorkerStore(
                project_id=config.firebase_project_id,
                credentials_path=config.firebase_credentials_path,
                collection=config.workers_collection,
            )
        if config.data_source == "json":
            return JsonWorkerStore(config.workers_json_path)
        return InMemoryWorkerStore()


_state: Optional[AppState] = None


def get_state() -> AppState:
    """Get or create the global app state."""
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global app state (None resets it)."""
    global _state
    _state = state
