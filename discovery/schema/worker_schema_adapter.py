"""
Worker schema adapter: raw record-store document → WorkerRecord.

Decoding returns a tagged result instead of raising, so the search pipeline
can drop one bad document and keep going:

    result = decode_worker(doc)
    if isinstance(result, Ok):
        use(result.value)
    else:
        log(result.error)

Documents are the `users` collection shape: availability_status, location
(work areas), languages, job, gender, contract_type, profile_picture_url,
about_me, work_history, education. Documents with a role other than
"worker" (e.g. business accounts) are rejected.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from ..errors import MalformedRecord
from ..models.worker import WorkerRecord

logger = logging.getLogger(__name__)

WORKER_ROLE = "worker"


@dataclass(frozen=True)
class Ok:
    value: WorkerRecord


@dataclass(frozen=True)
class Err:
    error: MalformedRecord


DecodeResult = Union[Ok, Err]


def _record_id(doc: Any) -> Optional[str]:
    if isinstance(doc, Mapping):
        rid = doc.get("id")
        return str(rid) if rid is not None else None
    return None


def _reasons(e: ValidationError) -> List[str]:
    reasons = []
    for err in e.errors():
        field = ".".join(str(part) for part in err.get("loc", ())) or "record"
        msg = err.get("msg", "invalid")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        reasons.append(f"{field}: {msg}")
    return reasons


def decode_worker(doc: Any) -> DecodeResult:
    """Decode one raw document. Never raises for bad data."""
    record_id = _record_id(doc)
    if not isinstance(doc, Mapping):
        return Err(MalformedRecord(None, [f"expected a mapping, got {type(doc).__name__}"]))
    role = doc.get("role")
    if role is not None and role != WORKER_ROLE:
        return Err(MalformedRecord(record_id, [f"role: expected {WORKER_ROLE!r}, got {role!r}"]))
    try:
        return Ok(WorkerRecord.model_validate(dict(doc)))
    except ValidationError as e:
        return Err(MalformedRecord(record_id, _reasons(e)))


def decode_workers(docs: Iterable[Any]) -> Tuple[List[WorkerRecord], List[MalformedRecord]]:
    """
    Decode a batch of documents.

    Returns:
        records: successfully decoded workers, in input order
        rejected: one MalformedRecord per excluded document (each logged as a warning)
    """
    records: List[WorkerRecord] = []
    rejected: List[MalformedRecord] = []
    for doc in docs:
        result = decode_worker(doc)
        if isinstance(result, Ok):
            records.append(result.value)
        else:
            logger.warning(
                "[decode] MALFORMED_WORKER_RECORD id=%s reasons=%s",
                result.error.record_id, result.error.reasons,
            )
            rejected.append(result.error)
    return records, rejected
