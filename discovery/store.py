"""
Worker record store abstraction.

Supplies raw worker documents to the search pipeline and per-worker change
notifications to profile views. Implementations: in-memory (tests, local),
JSON file, Firestore (production). See discovery_server.services.
"""

from typing import Any, Callable, Dict, List, Optional, Protocol

# Called with the raw document on every change, or None when it does not exist.
ChangeCallback = Callable[[Optional[Dict[str, Any]]], None]


class Subscription(Protocol):
    """Handle for a live subscription. unsubscribe() is idempotent."""

    def unsubscribe(self) -> None:
        ...


class WorkerStore(Protocol):
    """Protocol for worker document access."""

    async def fetch_workers(self, equals: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        One bulk read of worker documents.

        equals holds field == value predicates to apply in the query
        (always includes availability_status == True from the search path).
        Raises on any read failure; the caller turns it into DataSourceUnavailable.
        """
        ...

    def get_worker(self, worker_id: str) -> Optional[Dict[str, Any]]:
        """Return the raw document for worker_id, or None."""
        ...

    def subscribe(self, worker_id: str, on_change: ChangeCallback) -> Subscription:
        """Register on_change for worker_id. The current state is delivered first."""
        ...
