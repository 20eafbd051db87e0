"""
Worker model: typed, immutable snapshot of a worker profile document.

Field aliases follow the stored document keys (availability_status, location,
field); Python code uses the attribute names. Built from raw documents by
discovery.schema.decode_worker, which turns validation failures into
MalformedRecord instead of failing the whole search.
"""

from datetime import date
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from ..utils.dates import to_date
from .vocabulary import ContractType, Gender, JobType, Language, WorkArea, parse_term, parse_terms

_RECORD_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class WorkExperience(BaseModel):
    """One work history entry."""

    model_config = _RECORD_CONFIG

    company_name: str = ""
    position: str = ""
    description: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current_job: StrictBool = False

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _normalise_date(cls, value: Any) -> Optional[date]:
        return to_date(value)


class Education(BaseModel):
    """One education entry."""

    model_config = _RECORD_CONFIG

    institution: str = ""
    degree: str = ""
    field_of_study: str = Field("", alias="field")
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current_study: StrictBool = False

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _normalise_date(cls, value: Any) -> Optional[date]:
        return to_date(value)


class WorkerRecord(BaseModel):
    """
    Worker profile as seen by discovery.

    Enum-valued fields only hold members of their closed vocabulary;
    availability defaults to False when the document does not carry it.
    """

    model_config = _RECORD_CONFIG

    id: str
    availability: StrictBool = Field(False, alias="availability_status")
    full_name: Optional[str] = None
    job: Optional[JobType] = None
    work_areas: List[WorkArea] = Field(default_factory=list, alias="location")
    languages: List[Language] = Field(default_factory=list)
    gender: Optional[Gender] = None
    contract_type: Optional[ContractType] = None
    profile_picture_url: Optional[str] = None
    about_me: Optional[str] = None
    work_history: List[WorkExperience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def _id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("id must not be blank")
        return value

    @field_validator("job", mode="before")
    @classmethod
    def _parse_job(cls, value: Any) -> Optional[JobType]:
        return parse_term(JobType, value)

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: Any) -> Optional[Gender]:
        return parse_term(Gender, value)

    @field_validator("contract_type", mode="before")
    @classmethod
    def _parse_contract_type(cls, value: Any) -> Optional[ContractType]:
        return parse_term(ContractType, value)

    @field_validator("work_areas", mode="before")
    @classmethod
    def _parse_work_areas(cls, value: Any) -> List[WorkArea]:
        return parse_terms(WorkArea, value)

    @field_validator("languages", mode="before")
    @classmethod
    def _parse_languages(cls, value: Any) -> List[Language]:
        return parse_terms(Language, value)

    @field_validator("work_history", "education", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def has_profile_picture(self) -> bool:
        return bool(self.profile_picture_url and self.profile_picture_url.strip())
