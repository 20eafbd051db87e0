"""Backing logic: worker stores and live profile watches."""

from .firestore_worker_store import FirestoreSubscription, FirestoreWorkerStore
from .profile_watch import ProfileCompletion, watch_profile_completion, watch_worker
from .worker_store import InMemorySubscription, InMemoryWorkerStore, JsonWorkerStore

__all__ = [
    "FirestoreSubscription",
    "FirestoreWorkerStore",
    "InMemorySubscription",
    "InMemoryWorkerStore",
    "JsonWorkerStore",
    "ProfileCompletion",
    "watch_profile_completion",
    "watch_worker",
]
