"""
Search criteria: the hard requirements a business sets before searching.

Every field is optional; an unset field (or an empty language list) matches
everything. Values are checked against the closed vocabularies when the
criteria are built, so a typo surfaces as InvalidCriteria instead of a
silently empty result.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import InvalidCriteria
from .vocabulary import ContractType, Gender, JobType, Language, WorkArea, parse_term, parse_terms


class SearchCriteria(BaseModel):
    """Mandatory filters for one search. Build with SearchCriteria.from_dict for raw input."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    job: Optional[JobType] = None
    work_area: Optional[WorkArea] = Field(None, alias="workArea")
    languages: List[Language] = Field(default_factory=list)
    gender: Optional[Gender] = None
    contract_type: Optional[ContractType] = Field(None, alias="contractType")

    @field_validator("job", mode="before")
    @classmethod
    def _parse_job(cls, value: Any) -> Optional[JobType]:
        return parse_term(JobType, value)

    @field_validator("work_area", mode="before")
    @classmethod
    def _parse_work_area(cls, value: Any) -> Optional[WorkArea]:
        return parse_term(WorkArea, value)

    @field_validator("languages", mode="before")
    @classmethod
    def _parse_languages(cls, value: Any) -> List[Language]:
        return parse_terms(Language, value)

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: Any) -> Optional[Gender]:
        return parse_term(Gender, value)

    @field_validator("contract_type", mode="before")
    @classmethod
    def _parse_contract_type(cls, value: Any) -> Optional[ContractType]:
        return parse_term(ContractType, value)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SearchCriteria":
        """
        Build criteria from caller input (camelCase or snake_case keys).

        Raises:
            InvalidCriteria: unknown key, or a value outside its vocabulary.
        """
        try:
            return cls.model_validate(dict(data or {}))
        except ValidationError as e:
            raise InvalidCriteria([_describe(err) for err in e.errors()]) from e

    def is_empty(self) -> bool:
        """True when no field narrows the search."""
        return not (self.job or self.work_area or self.languages or self.gender or self.contract_type)


def _describe(err: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in err.get("loc", ())) or "criteria"
    message = err.get("msg", "invalid value")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{location}: {message}"


def ensure_criteria(
    criteria: Union[SearchCriteria, Mapping[str, Any], None],
) -> SearchCriteria:
    """Accept SearchCriteria, a raw mapping, or None (no filters)."""
    if isinstance(criteria, SearchCriteria):
        return criteria
    return SearchCriteria.from_dict(criteria)
