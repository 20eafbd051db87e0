"""
Worker stores backed by process memory or a JSON file.

InMemoryWorkerStore is injected in tests and local runs in place of a real
database; JsonWorkerStore loads a snapshot file (DATA_SOURCE=json). Both hand
out deep copies so one search never sees another caller's mutations.
"""

import copy
import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from discovery.store import ChangeCallback

logger = logging.getLogger(__name__)


class InMemorySubscription:
    """Subscription handle for InMemoryWorkerStore."""

    def __init__(self, store: "InMemoryWorkerStore", worker_id: str, on_change: ChangeCallback):
        self._store = store
        self.worker_id = worker_id
        self.on_change = on_change
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self.active = False
            self._store._remove_subscription(self)


class InMemoryWorkerStore:
    """
    Worker store holding raw documents in a dict keyed by id.

    put/delete notify subscribers of that id synchronously.
    """

    def __init__(self, workers: Optional[Iterable[Dict[str, Any]]] = None):
        self._workers: Dict[str, Dict[str, Any]] = {}
        self._subscriptions: Dict[str, List[InMemorySubscription]] = {}
        self._lock = threading.Lock()
        for doc in workers or []:
            self._insert(doc)

    def _insert(self, doc: Dict[str, Any]) -> str:
        worker_id = doc.get("id")
        if not worker_id:
            raise ValueError("worker document requires an id")
        self._workers[str(worker_id)] = copy.deepcopy(doc)
        return str(worker_id)

    def __len__(self) -> int:
        return len(self._workers)

    async def fetch_workers(self, equals: Dict[str, Any]) -> List[Dict[str, Any]]:
        with self._lock:
            docs = list(self._workers.values())
        return [
            copy.deepcopy(doc)
            for doc in docs
            if all(doc.get(field) == value for field, value in equals.items())
        ]

    def get_worker(self, worker_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            doc = self._workers.get(worker_id)
        return copy.deepcopy(doc) if doc is not None else None

    def put(self, doc: Dict[str, Any]) -> None:
        """Insert or replace a document and notify its subscribers."""
        with self._lock:
            worker_id = self._insert(doc)
        self._notify(worker_id)

    def delete(self, worker_id: str) -> bool:
        """Remove a document. Subscribers receive None."""
        with self._lock:
            removed = self._workers.pop(worker_id, None) is not None
        if removed:
            self._notify(worker_id)
        return removed

    def subscribe(self, worker_id: str, on_change: ChangeCallback) -> InMemorySubscription:
        sub = InMemorySubscription(self, worker_id, on_change)
        with self._lock:
            self._subscriptions.setdefault(worker_id, []).append(sub)
        try:
            on_change(self.get_worker(worker_id))
        except Exception:
            sub.unsubscribe()
            raise
        return sub

    def subscriber_count(self, worker_id: str) -> int:
        with self._lock:
            return len(self._subscriptions.get(worker_id, []))

    def _remove_subscription(self, sub: InMemorySubscription) -> None:
        with self._lock:
            subs = self._subscriptions.get(sub.worker_id, [])
            if sub in subs:
                subs.remove(sub)
            if not subs:
                self._subscriptions.pop(sub.worker_id, None)

    def _notify(self, worker_id: str) -> None:
        with self._lock:
            subs = list(self._subscriptions.get(worker_id, []))
        for sub in subs:
            if sub.active:
                sub.on_change(self.get_worker(worker_id))


class JsonWorkerStore(InMemoryWorkerStore):
    """
    Worker store loaded from a JSON file.

    Accepts either a list of worker documents or {"users": [...]}. Only
    documents with an id are loaded. Changes are kept in memory, not written back.
    """

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Workers JSON not found: {self._path}")
        with open(self._path) as f:
            data = json.load(f)
        docs = data.get("users", []) if isinstance(data, dict) else data
        if not isinstance(docs, list):
            raise ValueError(f"Workers JSON must hold a list of documents: {self._path}")
        super().__init__(d for d in docs if isinstance(d, dict) and d.get("id"))
        logger.info("[JsonWorkerStore] loaded %d documents from %s", len(self), self._path)
