#!/usr/bin/env python3
"""
Score Stage Tests

Scoring Rules:
--------------
- profile picture: 10 points when set
- completeness: 10 points only at 100% (binary)
- experience: per-employer points; 0 points per year by default (reserved)
- total: always the exact sum of the three components

Run:
----
    pytest tests/test_scoring.py -v
"""

import pytest
from pydantic import ValidationError

from discovery.models.config import DEFAULT_CONFIG, RankingConfig
from discovery.models.scoring import ScoreBreakdown
from discovery.stages.scoring import experience_breakdown, score_worker

from conftest import AS_OF, make_worker

EXPERIENCE_ON = RankingConfig(experience_points_per_year=2, experience_points_cap_per_employer=5)


class TestProfileSignals:

    def test_full_profile_with_picture_scores_20(self):
        score = score_worker(make_worker(), as_of=AS_OF)
        assert (score.profile_picture, score.completeness, score.experience) == (10, 10, 0)
        assert score.total == 20

    def test_no_picture_loses_both_signals(self):
        # The picture is also a checklist item, so completeness drops below 100
        score = score_worker(make_worker(profile_picture_url=None), as_of=AS_OF)
        assert score.profile_picture == 0
        assert score.completeness == 0
        assert score.total == 0

    def test_completeness_is_binary(self):
        score = score_worker(make_worker(education=[]), as_of=AS_OF)
        assert score.completeness == 0
        assert score.profile_picture == 10
        assert score.total == 10

    def test_config_points(self):
        config = RankingConfig(profile_picture_points=3, completeness_points=7)
        assert score_worker(make_worker(), config, as_of=AS_OF).total == 10


class TestExperience:

    def test_reserved_by_default(self):
        breakdown = experience_breakdown(make_worker(), DEFAULT_CONFIG, as_of=AS_OF)
        assert [(e.company, e.years, e.points) for e in breakdown] == [("Potato Head", 3.0, 0)]
        assert score_worker(make_worker(), as_of=AS_OF).experience == 0

    def test_points_per_year_with_cap(self):
        worker = make_worker(work_history=[
            {"company_name": "Potato Head", "start_date": "2019-01-01", "end_date": "2022-01-01"},
            {"company_name": "Ku De Ta", "start_date": "2022-02-01", "end_date": "2023-03-01"},
        ])
        breakdown = experience_breakdown(worker, EXPERIENCE_ON, as_of=AS_OF)
        assert [(e.company, e.points) for e in breakdown] == [("Potato Head", 5), ("Ku De Ta", 2)]
        assert score_worker(worker, EXPERIENCE_ON, as_of=AS_OF).experience == 7

    def test_same_company_entries_are_summed(self):
        worker = make_worker(work_history=[
            {"company_name": "Mama San", "start_date": "2018-01-01", "end_date": "2019-01-01"},
            {"company_name": "Mama San", "start_date": "2020-01-01", "end_date": "2021-01-01"},
        ])
        breakdown = experience_breakdown(worker, EXPERIENCE_ON, as_of=AS_OF)
        assert len(breakdown) == 1
        assert breakdown[0].years == 2.0
        assert breakdown[0].points == 4

    def test_current_job_runs_to_as_of(self):
        worker = make_worker(work_history=[
            {"company_name": "W Bali", "start_date": "2021-01-01", "is_current_job": True},
        ])
        assert experience_breakdown(worker, as_of=AS_OF)[0].years == 3.0

    def test_missing_start_and_inverted_span_count_zero(self):
        worker = make_worker(work_history=[
            {"company_name": "Nowhere"},
            {"company_name": "Backwards", "start_date": "2022-01-01", "end_date": "2021-01-01"},
        ])
        assert [e.years for e in experience_breakdown(worker, EXPERIENCE_ON, as_of=AS_OF)] == [0.0, 0.0]


class TestScoreBreakdown:

    @pytest.mark.parametrize("parts", [(0, 0, 0), (0, 10, 0), (0, 10, 10), (7, 10, 10), (3, 0, 10)])
    def test_total_is_exact_sum(self, parts):
        experience, picture, completeness = parts
        score = ScoreBreakdown(experience=experience, profile_picture=picture, completeness=completeness)
        assert score.total == experience + picture + completeness

    def test_total_is_serialized_but_not_settable(self):
        score = ScoreBreakdown(experience=1, profile_picture=10, completeness=0)
        assert score.model_dump()["total"] == 11
        with pytest.raises((ValidationError, AttributeError, TypeError)):
            score.total = 99
