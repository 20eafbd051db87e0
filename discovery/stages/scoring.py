"""
Score stage: soft score for one worker that already passed the filters.

Components:
- profile_picture: config.profile_picture_points when a picture is set
- completeness: config.completeness_points when the checklist is 100% (binary)
- experience: per-employer points from work history (see experience_breakdown)

total is computed by ScoreBreakdown and is always the exact sum.
"""

import math
from collections import OrderedDict
from datetime import date
from typing import List, Optional

from ..models.config import DEFAULT_CONFIG, RankingConfig
from ..models.scoring import ExperienceEntry, ScoreBreakdown
from ..models.worker import WorkerRecord
from ..utils.dates import years_between
from .completeness import is_profile_complete


def experience_breakdown(
    worker: WorkerRecord,
    config: RankingConfig = DEFAULT_CONFIG,
    as_of: Optional[date] = None,
) -> List[ExperienceEntry]:
    """
    Years and points per employer, in order of first appearance in work history.

    Each entry spans start_date to end_date; current jobs and entries without
    an end date run to as_of (default: today). Entries without a start date
    count 0 years. Several entries at the same company are summed.

    points = min(floor(years) * experience_points_per_year, experience_points_cap_per_employer)
    """
    today = as_of or date.today()
    years_by_company: "OrderedDict[str, float]" = OrderedDict()
    for entry in worker.work_history:
        company = entry.company_name.strip() or "Unknown"
        years = 0.0
        if entry.start_date is not None:
            end = today if entry.is_current_job or entry.end_date is None else entry.end_date
            years = years_between(entry.start_date, end)
        years_by_company[company] = years_by_company.get(company, 0.0) + years

    out = []
    for company, years in years_by_company.items():
        years = round(years, 1)
        points = min(
            math.floor(years) * config.experience_points_per_year,
            config.experience_points_cap_per_employer,
        )
        out.append(ExperienceEntry(company=company, years=years, points=points))
    return out


def score_worker(
    worker: WorkerRecord,
    config: RankingConfig = DEFAULT_CONFIG,
    as_of: Optional[date] = None,
    breakdown: Optional[List[ExperienceEntry]] = None,
) -> ScoreBreakdown:
    """
    Compute the score breakdown for one worker.

    breakdown may be passed when the caller already computed
    experience_breakdown for the same worker, config and date.
    """
    if breakdown is None:
        breakdown = experience_breakdown(worker, config, as_of)
    return ScoreBreakdown(
        experience=sum(entry.points for entry in breakdown),
        profile_picture=config.profile_picture_points if worker.has_profile_picture else 0,
        completeness=config.completeness_points if is_profile_complete(worker) else 0,
    )
