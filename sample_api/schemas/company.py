"""Company Schemas: Pydantic request models with field-level validation and escaping.

Invariants:
    - Wire names are companyName / companyCity; Python names are name / city
    - name is non-empty; city is US-English letters and spaces only
    - Every accepted value is HTML-escaped (core/sanitize.py) before it reaches a service
    - CompanyPatch: absent or null field means "not supplied", never "clear"

Design Decisions:
    - Checks run before escaping, so the character-class rule sees the raw input
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sample_api.core.sanitize import escape_text, is_alpha_space

CITY_RULE_MESSAGE = "companyCity must contain only letters and spaces"


def _sanitize_name(v: str | None) -> str | None:
    return escape_text(v) if v is not None else None


def _sanitize_city(v: str | None) -> str | None:
    if v is None:
        return None
    if not is_alpha_space(v):
        raise ValueError(CITY_RULE_MESSAGE)
    return escape_text(v)


class CompanyCreate(BaseModel):
    """Company creation: both fields required."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="companyName", min_length=1)
    city: str = Field(alias="companyCity", min_length=1)

    @field_validator("name")
    @classmethod
    def sanitize_name(cls, v: str) -> str:
        return _sanitize_name(v)

    @field_validator("city")
    @classmethod
    def sanitize_city(cls, v: str) -> str:
        return _sanitize_city(v)


class CompanyReplace(CompanyCreate):
    """Full replacement: same rules as creation, every field resupplied."""


class CompanyPatch(BaseModel):
    """Partial update: any subset of fields."""
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, alias="companyName", min_length=1)
    city: str | None = Field(None, alias="companyCity", min_length=1)

    @field_validator("name")
    @classmethod
    def sanitize_name(cls, v: str | None) -> str | None:
        return _sanitize_name(v)

    @field_validator("city")
    @classmethod
    def sanitize_city(cls, v: str | None) -> str | None:
        return _sanitize_city(v)
