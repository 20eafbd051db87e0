"""
Firestore worker store: worker profiles in the `users` collection.

Used when DATA_SOURCE=firebase. Bulk search reads go through
google.cloud.firestore.AsyncClient with equality predicates pushed into the
query; single-document reads and live subscriptions use the firebase-admin
client (on_snapshot).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from discovery.store import ChangeCallback

logger = logging.getLogger(__name__)


def _project_id_from_credentials_file(credentials_path: Union[Path, str]) -> Optional[str]:
    """Read project_id from a Google service account JSON file if present."""
    path = Path(credentials_path)
    if not path.is_file():
        return None
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return None
    return data.get("project_id") or data.get("projectId")


def _doc_to_dict(doc: Any) -> Dict[str, Any]:
    d = doc.to_dict() or {}
    d["id"] = doc.id
    return d


class FirestoreSubscription:
    """Wraps a Firestore Watch so unsubscribe() can be called more than once."""

    def __init__(self, watch: Any):
        self._watch = watch

    def unsubscribe(self) -> None:
        if self._watch is not None:
            watch, self._watch = self._watch, None
            watch.unsubscribe()


class FirestoreWorkerStore:
    """
    Worker store backed by Cloud Firestore.

    Each document in the collection is one user; worker documents carry
    availability_status, job, location, languages, gender, contract_type,
    profile_picture_url, about_me, work_history and education.
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        credentials_path: Optional[Union[Path, str]] = None,
        *,
        collection: str = "users",
    ):
        try:
            import firebase_admin
            from firebase_admin import credentials, firestore
            from google.cloud.firestore import AsyncClient
            from google.oauth2 import service_account
        except ImportError as e:
            raise ImportError(
                "firebase-admin and google-cloud-firestore are required for FirestoreWorkerStore. "
                "pip install firebase-admin google-cloud-firestore"
            ) from e
        if not credentials_path:
            raise ValueError("FirestoreWorkerStore requires credentials_path")
        self._credentials_path = str(Path(credentials_path).resolve())
        if not firebase_admin._apps:
            cred = credentials.Certificate(self._credentials_path)
            opts = {"projectId": project_id} if project_id else None
            firebase_admin.initialize_app(cred, opts)
        self._db = firestore.client()
        self._collection_name = collection
        self._coll = self._db.collection(collection)

        creds = service_account.Credentials.from_service_account_file(self._credentials_path)
        proj = project_id or _project_id_from_credentials_file(self._credentials_path)
        self._async_db = AsyncClient(project=proj, credentials=creds)
        logger.info(
            "[FirestoreWorkerStore] initialized (project=%s, collection=%s)",
            proj or "inferred", collection,
        )

    async def fetch_workers(self, equals: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Single streamed query with every equality predicate applied server-side."""
        query = self._async_db.collection(self._collection_name)
        for field, value in equals.items():
            query = query.where(field, "==", value)
        out = []
        async for doc in query.stream():
            out.append(_doc_to_dict(doc))
        logger.debug("[FirestoreWorkerStore] fetch_workers: streamed %d docs for %s", len(out), equals)
        return out

    def get_worker(self, worker_id: str) -> Optional[Dict[str, Any]]:
        doc = self._coll.document(worker_id).get()
        return _doc_to_dict(doc) if doc.exists else None

    def subscribe(self, worker_id: str, on_change: ChangeCallback) -> FirestoreSubscription:
        """Listen to users/{worker_id}; on_change gets the document or None when it is missing."""

        def _on_snapshot(doc_snapshots, changes, read_time):
            for snap in doc_snapshots:
                on_change(_doc_to_dict(snap) if snap.exists else None)

        watch = self._coll.document(worker_id).on_snapshot(_on_snapshot)
        return FirestoreSubscription(watch)
