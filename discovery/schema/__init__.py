"""Schema adapters for converting stored documents into worker models."""

from .worker_schema_adapter import (
    WORKER_ROLE,
    DecodeResult,
    Err,
    Ok,
    decode_worker,
    decode_workers,
)

__all__ = [
    "WORKER_ROLE",
    "DecodeResult",
    "Err",
    "Ok",
    "decode_worker",
    "decode_workers",
]
