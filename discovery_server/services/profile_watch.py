"""
Live worker profile updates for dashboard views.

watch_worker wraps a store subscription in a context manager: every emission
is decoded before reaching the callback, and the subscription is released
when the block exits, including on error.

    with watch_profile_completion(store, worker_id, on_update):
        ...  # on_update(ProfileCompletion | None) on every change
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional

from discovery.models.worker import WorkerRecord
from discovery.schema import Ok, decode_worker
from discovery.stages.completeness import completeness_checklist, profile_completeness
from discovery.store import Subscription, WorkerStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileCompletion:
    worker: WorkerRecord
    percentage: int
    checklist: Dict[str, bool]

    @classmethod
    def of(cls, worker: WorkerRecord) -> "ProfileCompletion":
        return cls(
            worker=worker,
            percentage=profile_completeness(worker),
            checklist=completeness_checklist(worker),
        )


@contextmanager
def watch_worker(
    store: WorkerStore,
    worker_id: str,
    on_update: Callable[[Optional[WorkerRecord]], None],
) -> Iterator[Subscription]:
    """
    Subscribe to one worker for the duration of the with-block.

    on_update receives the decoded WorkerRecord, or None when the document
    does not exist. Emissions that fail decoding are logged and skipped.
    """

    def _handle(doc):
        if doc is None:
            on_update(None)
            return
        result = decode_worker(doc)
        if isinstance(result, Ok):
            on_update(result.value)
        else:
            logger.warning(
                "[watch] MALFORMED_WORKER_RECORD id=%s reasons=%s",
                result.error.record_id, result.error.reasons,
            )

    subscription = store.subscribe(worker_id, _handle)
    try:
        yield subscription
    finally:
        subscription.unsubscribe()


@contextmanager
def watch_profile_completion(
    store: WorkerStore,
    worker_id: str,
    on_update: Callable[[Optional[ProfileCompletion]], None],
) -> Iterator[Subscription]:
    """Like watch_worker, but delivers the completion percentage and checklist."""

    def _handle(worker: Optional[WorkerRecord]) -> None:
        on_update(ProfileCompletion.of(worker) if worker is not None else None)

    with watch_worker(store, worker_id, _handle) as subscription:
        yield subscription
