"""Core domain models for match scoring.

This module defines the immutable inputs of the scorer:
- JobSeekerProfile: what a job seeker is looking for
- JobPosting: what a vacancy offers and requires

Both models accept records straight from the backing store. Identifiers are
coerced to strings, numbers that cannot be parsed become None, and unknown
keys are ignored, so a persisted row can be passed in without reshaping.
"""

from datetime import date
from typing import Any, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from jobboard.normalization.demographics import (
    coerce_age_limit,
    normalize_education,
    normalize_gender,
    parse_birth_date,
)
from jobboard.normalization.experience import (
    NO_EXPERIENCE,
    experience_code_from_years,
    normalize_experience_code,
)
from jobboard.utils.coercion import coerce_identifier, coerce_number

from .exceptions import InvalidRecordError

RecordT = TypeVar("RecordT", bound="_Record")


class _Record(BaseModel):
    """Shared behaviour for scorer inputs."""

    model_config = {"frozen": True, "extra": "ignore"}

    @classmethod
    def from_record(cls: Type[RecordT], record: Union[RecordT, Mapping[str, Any]]) -> RecordT:
        """Build a model from a model instance or a plain mapping.

        Args:
            record: Existing instance (returned as-is) or mapping of fields

        Returns:
            Validated, immutable model instance

        Raises:
            InvalidRecordError: If record is neither a model nor a mapping
        """
        if isinstance(record, cls):
            return record
        if not isinstance(record, Mapping):
            raise InvalidRecordError(
                f"expected a mapping, got {type(record).__name__}",
                record_type=cls._record_type(),
            )
        try:
            return cls.model_validate(dict(record))
        except ValidationError as e:
            raise InvalidRecordError(str(e), record_type=cls._record_type()) from e

    @classmethod
    def _record_type(cls) -> str:
        return cls.__name__


class JobSeekerProfile(_Record):
    """Search preferences of a job seeker.

    category_ids, when non-empty, replaces category_id as the set of
    acceptable categories (multi-category resumes).
    """

    region_id: Optional[str] = Field(None, description="Preferred region")
    district_id: Optional[str] = Field(None, description="Preferred district (numeric or UUID)")
    category_id: Optional[str] = Field(None, description="Preferred category")
    category_ids: Tuple[str, ...] = Field(default_factory=tuple, description="Preferred categories")
    expected_salary_min: Optional[float] = Field(None, description="Minimum expected salary")
    experience_level: Optional[str] = Field(None, description="Experience code or label")
    gender: Optional[str] = Field(None, description="male, female or any")
    birth_date: Optional[date] = Field(None, description="Date of birth")
    education_level: Optional[int] = Field(None, description="Education level 0..4")
    title: Optional[str] = Field(None, description="Wanted position")

    @field_validator("region_id", "district_id", "category_id", "experience_level", mode="before")
    @classmethod
    def coerce_ids(cls, v: Any) -> Optional[str]:
        """Coerce identifiers to strings."""
        return coerce_identifier(v)

    @field_validator("gender", mode="before")
    @classmethod
    def coerce_gender(cls, v: Any) -> Optional[str]:
        return normalize_gender(v)

    @field_validator("birth_date", mode="before")
    @classmethod
    def coerce_birth_date(cls, v: Any) -> Optional[date]:
        """Parse the birth date; unparseable values mean 'not set'."""
        return parse_birth_date(v)

    @field_validator("education_level", mode="before")
    @classmethod
    def coerce_education(cls, v: Any) -> Optional[int]:
        """Map codes and labels onto 0..4; an unrecognized label counts as 0."""
        if coerce_identifier(v) is None:
            return None
        return normalize_education(v)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v).strip() or None

    @field_validator("category_ids", mode="before")
    @classmethod
    def coerce_category_ids(cls, v: Any) -> Tuple[str, ...]:
        """Coerce each category id, dropping empty entries."""
        if v is None:
            return ()
        if isinstance(v, (str, int, float)):
            v = [v]
        coerced = (coerce_identifier(item) for item in v)
        return tuple(item for item in coerced if item is not None)

    @field_validator("expected_salary_min", mode="before")
    @classmethod
    def coerce_salary(cls, v: Any) -> Optional[float]:
        """Parse salary; non-positive or unparseable values mean 'not set'."""
        number = coerce_number(v)
        if number is None or number <= 0:
            return None
        return number

    @property
    def accepted_categories(self) -> Tuple[str, ...]:
        """Categories this profile accepts."""
        if self.category_ids:
            return self.category_ids
        if self.category_id:
            return (self.category_id,)
        return ()

    @property
    def experience_code(self) -> Optional[str]:
        """Canonical experience code.

        None when the profile states nothing; an unrecognized value counts
        as no experience.
        """
        if self.experience_level is None:
            return None
        return normalize_experience_code(self.experience_level) or NO_EXPERIENCE

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "json_schema_extra": {"example": {
            "region_id": "2",
            "district_id": "140",
            "category_id": "a0000009-0009-4000-8000-000000000009",
            "expected_salary_min": 3000000,
            "experience_level": "1_3_years",
        }},
    }


class JobPosting(_Record):
    """A vacancy as seen by the scorer."""

    id: Optional[str] = Field(None, description="Vacancy identifier")
    title: Optional[str] = Field(None, description="Vacancy title")
    region_id: Optional[str] = Field(None, description="Region of the workplace")
    district_id: Optional[str] = Field(None, description="District (numeric or UUID)")
    category_id: Optional[str] = Field(None, description="Vacancy category")
    salary_min: Optional[float] = Field(None, description="Lower bound of offered salary")
    salary_max: Optional[float] = Field(None, description="Upper bound of offered salary")
    experience: Optional[str] = Field(None, description="Required experience code or label")
    experience_years: Optional[float] = Field(None, description="Required years (legacy imports)")
    work_mode: Optional[str] = Field(None, description="onsite, remote or hybrid")
    employment_type: Optional[str] = Field(None, description="full_time, part_time, remote...")
    title_uz: Optional[str] = Field(None, description="Vacancy title in Uzbek")
    title_ru: Optional[str] = Field(None, description="Vacancy title in Russian")
    gender: Optional[str] = Field(None, description="Required gender (male, female, any)")
    age_min: Optional[int] = Field(None, description="Youngest accepted age")
    age_max: Optional[int] = Field(None, description="Oldest accepted age")
    education_level: Optional[int] = Field(None, description="Required education level 0..4")

    @field_validator("id", "region_id", "district_id", "category_id", "experience", mode="before")
    @classmethod
    def coerce_ids(cls, v: Any) -> Optional[str]:
        """Coerce identifiers to strings."""
        return coerce_identifier(v)

    @field_validator("gender", mode="before")
    @classmethod
    def coerce_gender(cls, v: Any) -> Optional[str]:
        return normalize_gender(v)

    @field_validator("age_min", "age_max", mode="before")
    @classmethod
    def coerce_age(cls, v: Any) -> Optional[int]:
        """Parse age bounds; zero means no bound."""
        return coerce_age_limit(v)

    @field_validator("education_level", mode="before")
    @classmethod
    def coerce_education(cls, v: Any) -> Optional[int]:
        if coerce_identifier(v) is None:
            return None
        return normalize_education(v)

    @field_validator("title", "title_uz", "title_ru", "work_mode", "employment_type", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Optional[str]:
        """Strip text fields, mapping empty strings to None."""
        if v is None:
            return None
        stripped = str(v).strip()
        return stripped or None

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def coerce_salary(cls, v: Any) -> Optional[float]:
        """Parse salary; non-positive or unparseable values mean 'not offered'."""
        number = coerce_number(v)
        if number is None or number <= 0:
            return None
        return number

    @field_validator("experience_years", mode="before")
    @classmethod
    def coerce_years(cls, v: Any) -> Optional[float]:
        """Parse numeric years."""
        return coerce_number(v)

    @property
    def experience_code(self) -> Optional[str]:
        """Canonical experience requirement, or None if unspecified."""
        code = normalize_experience_code(self.experience)
        if code is not None:
            return code
        return experience_code_from_years(self.experience_years)

    @property
    def is_remote(self) -> bool:
        """Whether the vacancy can be done from anywhere."""
        return "remote" in {
            (self.work_mode or "").lower(),
            (self.employment_type or "").lower(),
        }

    @property
    def display_title(self) -> Optional[str]:
        """Uzbek title, else Russian title, else the plain title."""
        return self.title_uz or self.title_ru or self.title

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "json_schema_extra": {"example": {
            "id": "job-1",
            "title": "Haydovchi",
            "region_id": 2,
            "district_id": 140,
            "category_id": "a0000009-0009-4000-8000-000000000009",
            "salary_min": 3500000,
            "salary_max": 5000000,
            "experience": "1-3 yil",
            "work_mode": "onsite",
        }},
    }
