"""
Shared fixtures: raw worker documents shaped like the `users` collection,
and an in-memory store pre-loaded with them.
"""

import copy
from datetime import date

import pytest

from discovery.schema import Ok, decode_worker
from discovery_server.services import InMemoryWorkerStore

# Fixed "today" so experience spans are stable.
AS_OF = date(2024, 1, 1)

FULL_PROFILE = {
    "id": "w-full",
    "role": "worker",
    "full_name": "Made Wirawan",
    "availability_status": True,
    "job": "Waiter",
    "location": ["Seminyak", "Canggu"],
    "languages": ["English", "Bahasa"],
    "gender": "male",
    "contract_type": "full_time",
    "profile_picture_url": "https://cdn.example.com/workers/w-full.jpg",
    "about_me": "Five years serving in beach clubs.",
    "work_history": [
        {
            "company_name": "Potato Head",
            "position": "Waiter",
            "description": "Floor service",
            "start_date": "2019-01-01",
            "end_date": "2022-01-01",
            "is_current_job": False,
        }
    ],
    "education": [
        {
            "institution": "SMK Pariwisata Denpasar",
            "degree": "Diploma",
            "field": "Hospitality",
            "start_date": "2014-07-01",
            "end_date": "2017-06-30",
            "is_current_study": False,
        }
    ],
}


def make_doc(**overrides):
    """Copy of FULL_PROFILE with overrides applied. A value of ... removes the key."""
    doc = copy.deepcopy(FULL_PROFILE)
    for key, value in overrides.items():
        if value is ...:
            doc.pop(key, None)
        else:
            doc[key] = value
    return doc


def make_worker(**overrides):
    """Decoded WorkerRecord built from make_doc(**overrides)."""
    result = decode_worker(make_doc(**overrides))
    assert isinstance(result, Ok), result
    return result.value


@pytest.fixture
def worker_doc():
    return make_doc


@pytest.fixture
def worker():
    return make_worker


@pytest.fixture
def mixed_pool():
    """Workers covering every filter dimension (all decoded)."""
    return [
        make_worker(id="w1", job="Waiter", location=["Kuta"], languages=["English"], gender="female"),
        make_worker(id="w2", job="Waiter", location=["Seminyak", "Kuta"], languages=["English", "Bahasa"]),
        make_worker(id="w3", job="Cook", location=["Ubud"], languages=["Bahasa"], contract_type="part_time"),
        make_worker(id="w4", job="Cook", location=["Kuta"], languages=["English", "Bahasa"], gender="female"),
        make_worker(id="w5", job="Waiter", availability_status=False),
        make_worker(id="w6", job="Bartender", location=["Canggu"], languages=[], gender=...),
    ]


@pytest.fixture
def store():
    return InMemoryWorkerStore([
        make_doc(id="a", job="Waiter"),
        make_doc(id="b", job="Waiter", profile_picture_url=None, education=[], about_me=""),
        make_doc(id="c", job="Cook", languages=["English"]),
        make_doc(id="d", job="Waiter", availability_status=False),
    ])
