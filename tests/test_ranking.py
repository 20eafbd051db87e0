#!/usr/bin/env python3
"""
Ranking Tests

Pipeline: mandatory filters → score each survivor → sort by total
(descending), ties broken by worker id (ascending).

Run:
----
    pytest tests/test_ranking.py -v
"""

import random

from discovery.models.criteria import SearchCriteria
from discovery.stages.ranking import build_search_result, rank_workers
from discovery.models.config import DEFAULT_CONFIG

from conftest import AS_OF, make_worker


class TestRankWorkers:

    def test_waiter_example(self):
        # A: picture + 100% complete. B: no picture, incomplete.
        worker_a = make_worker(id="A", job="Waiter")
        worker_b = make_worker(id="B", job="Waiter", profile_picture_url=None, education=[], about_me="")
        results = rank_workers([worker_b, worker_a], SearchCriteria.from_dict({"job": "Waiter"}), as_of=AS_OF)
        assert [r.worker.id for r in results] == ["A", "B"]
        assert [r.score.total for r in results] == [20, 0]

    def test_cook_languages_example(self):
        pool = [
            make_worker(id="en", job="Cook", languages=["English"]),
            make_worker(id="both", job="Cook", languages=["English", "Bahasa"]),
        ]
        criteria = SearchCriteria.from_dict({"job": "Cook", "languages": ["English", "Bahasa"]})
        assert [r.worker.id for r in rank_workers(pool, criteria, as_of=AS_OF)] == ["both"]

    def test_no_available_workers_gives_empty_list(self):
        pool = [make_worker(id="x", availability_status=False), make_worker(id="y", availability_status=False)]
        assert rank_workers(pool, SearchCriteria(), as_of=AS_OF) == []

    def test_ties_broken_by_id(self):
        pool = [make_worker(id=i) for i in ["m", "c", "x", "a"]]
        results = rank_workers(pool, SearchCriteria(), as_of=AS_OF)
        assert [r.worker.id for r in results] == ["a", "c", "m", "x"]

    def test_sorted_non_increasing_and_reproducible(self):
        rng = random.Random(7)
        pool = []
        for i in range(30):
            overrides = {"id": f"w{i:02d}"}
            if rng.random() < 0.5:
                overrides["profile_picture_url"] = None
            if rng.random() < 0.5:
                overrides["education"] = []
            pool.append(make_worker(**overrides))
        first = rank_workers(pool, SearchCriteria(), as_of=AS_OF)
        totals = [r.score.total for r in first]
        assert totals == sorted(totals, reverse=True)
        shuffled = list(pool)
        rng.shuffle(shuffled)
        second = rank_workers(shuffled, SearchCriteria(), as_of=AS_OF)
        assert [r.worker.id for r in first] == [r.worker.id for r in second]


class TestBuildSearchResult:

    def test_match_details(self):
        result = build_search_result(make_worker(), DEFAULT_CONFIG, as_of=AS_OF)
        details = result.match_details
        assert details.is_profile_complete is True
        assert details.has_profile_picture is True
        assert details.years_of_experience == 3.0
        assert [e.company for e in details.experience_breakdown] == ["Potato Head"]

    def test_incomplete_profile_details(self):
        result = build_search_result(make_worker(work_history=[], profile_picture_url=None), DEFAULT_CONFIG, as_of=AS_OF)
        assert result.match_details.is_profile_complete is False
        assert result.match_details.has_profile_picture is False
        assert result.match_details.years_of_experience == 0
        assert result.match_details.experience_breakdown == []
