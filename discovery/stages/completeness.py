"""
Profile completeness: fixed seven-item checklist, equal weight.

Shared by the score stage (completeness points) and the worker dashboard's
completion indicator. Both read PROFILE_CHECKLIST; there is no second copy.
"""

from typing import Callable, Dict, Optional, Tuple

from ..models.worker import WorkerRecord


def _has_text(value: Optional[str]) -> bool:
    return bool(value and value.strip())


PROFILE_CHECKLIST: Tuple[Tuple[str, Callable[[WorkerRecord], bool]], ...] = (
    ("about_me", lambda w: _has_text(w.about_me)),
    ("work_history", lambda w: len(w.work_history) > 0),
    ("education", lambda w: len(w.education) > 0),
    ("languages", lambda w: len(w.languages) > 0),
    ("job", lambda w: w.job is not None),
    ("work_areas", lambda w: len(w.work_areas) > 0),
    ("profile_picture", lambda w: w.has_profile_picture),
)


def completeness_checklist(worker: WorkerRecord) -> Dict[str, bool]:
    """Per-item checklist result, in checklist order."""
    return {name: bool(check(worker)) for name, check in PROFILE_CHECKLIST}


def profile_completeness(worker: WorkerRecord) -> int:
    """Completed share of the checklist as a whole percentage (0-100)."""
    done = sum(1 for _, check in PROFILE_CHECKLIST if check(worker))
    return round(100 * done / len(PROFILE_CHECKLIST))


def is_profile_complete(worker: WorkerRecord) -> bool:
    return profile_completeness(worker) == 100
