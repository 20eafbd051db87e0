"""
Ranking configuration: soft-score points.

RankingConfig defaults are defined here. The server may pass a dict (e.g.
from the JSON file named by RANKING_CONFIG_PATH); from_dict() merges it with
these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class RankingConfig(BaseModel):
    """Configuration for worker scoring."""

    model_config = ConfigDict(frozen=True)

    # -------------------------------------------------------------------------
    # Profile signals
    # -------------------------------------------------------------------------

    # Points when the worker has a profile picture.
    profile_picture_points: int = Field(10, ge=0)

    # Points when the profile checklist is 100% complete. All-or-nothing:
    # a 99% profile earns 0.
    completeness_points: int = Field(10, ge=0)

    # -------------------------------------------------------------------------
    # Experience signal
    # points per employer = min(floor(years) * points_per_year, cap_per_employer)
    # -------------------------------------------------------------------------

    # 0 keeps the experience signal reserved: years and the per-employer
    # breakdown are still reported, but contribute no points.
    experience_points_per_year: int = Field(0, ge=0)
    # Ceiling on the points any single employer can contribute.
    experience_points_cap_per_employer: int = Field(10, ge=0)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RankingConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "profile" in config_dict:
            profile = config_dict["profile"]
            if "picture_points" in profile:
                flat["profile_picture_points"] = profile["picture_points"]
            if "completeness_points" in profile:
                flat["completeness_points"] = profile["completeness_points"]
        if "experience" in config_dict:
            exp = config_dict["experience"]
            if "points_per_year" in exp:
                flat["experience_points_per_year"] = exp["points_per_year"]
            if "cap_per_employer" in exp:
                flat["experience_points_cap_per_employer"] = exp["cap_per_employer"]
        allowed = set(cls.model_fields)
        flat.update({k: v for k, v in config_dict.items() if k in allowed})
        return cls.model_validate(flat)


DEFAULT_CONFIG = RankingConfig()


def resolve_config(config: Optional["RankingConfig"]) -> "RankingConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
