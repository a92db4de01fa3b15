"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from jobboard.domain.regions import DEFAULT_ADJACENCY, RegionAdjacency
from jobboard.utils.coercion import coerce_identifier


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class Language(str, Enum):
    """Display languages for labels and match explanations."""

    UZ = "uz"
    RU = "ru"


class ScoringWeights(BaseModel):
    """Points awarded per matching factor."""

    region: int = Field(50, ge=0, description="Same region")
    neighbor_region: int = Field(15, ge=0, description="Region borders the preferred one")
    remote: int = Field(10, ge=0, description="Remote vacancy outside the preferred region")
    district: int = Field(15, ge=0, description="Same district")
    category: int = Field(15, ge=0, description="Category accepted by the profile")
    salary: int = Field(10, ge=0, description="Minimum offered salary meets expectation")
    salary_partial: int = Field(
        5, ge=0, description="Only the top of the salary range meets expectation"
    )
    experience: int = Field(10, ge=0, description="Profile has the required experience")
    gender: int = Field(10, ge=0, description="Profile gender meets the vacancy requirement")
    age: int = Field(5, ge=0, description="Profile age within the vacancy age range")
    education: int = Field(5, ge=0, description="Profile has the required education")
    title: int = Field(
        12, ge=0, description="Full title relevance; scaled by how closely titles match"
    )

    @model_validator(mode="after")
    def validate_ordering(self):
        """Partial-credit weights may not exceed their full-credit counterparts."""
        if self.neighbor_region > self.region:
            raise ValueError("neighbor_region weight cannot exceed region weight")
        if self.remote > self.region:
            raise ValueError("remote weight cannot exceed region weight")
        if self.salary_partial > self.salary:
            raise ValueError("salary_partial weight cannot exceed salary weight")
        return self


class ScoringConfig(BaseModel):
    """Match scoring settings."""

    weights: ScoringWeights = Field(default_factory=ScoringWeights, description="Factor weights")
    strong_match_threshold: int = Field(
        50, ge=1, description="Score at which a match is reported as strong"
    )
    strict_filtering: bool = Field(
        False, description="Drop vacancies failing a stated requirement when ranking"
    )
    min_title_relevance: float = Field(
        0.35,
        ge=0,
        le=1,
        description="Strict filtering drops titles less relevant than this",
    )


class RegionConfig(BaseModel):
    """Region adjacency settings.

    When neighbors is omitted the built-in table of Uzbekistan's regional
    borders is used. A configured table replaces it entirely.
    """

    neighbors: Optional[Dict[str, List[str]]] = Field(
        None, description="Region id -> bordering region ids"
    )

    @field_validator("neighbors", mode="before")
    @classmethod
    def coerce_region_ids(cls, v):
        """Accept integer ids from YAML and coerce them to strings."""
        if v is None:
            return None
        if not isinstance(v, dict):
            raise ValueError("neighbors must be a mapping of region id to a list of region ids")
        coerced = {}
        for region, adjacent in v.items():
            region_id = coerce_identifier(region)
            if region_id is None:
                raise ValueError("region ids cannot be empty")
            if adjacent is None:
                adjacent = []
            if not isinstance(adjacent, list):
                raise ValueError(f"neighbors of region {region_id} must be a list")
            coerced[region_id] = [
                other for other in (coerce_identifier(item) for item in adjacent) if other
            ]
        return coerced

    def build_adjacency(self) -> RegionAdjacency:
        """Build the adjacency table this configuration describes."""
        if self.neighbors is None:
            return DEFAULT_ADJACENCY
        return RegionAdjacency(self.neighbors)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for the match scorer."""

    scoring: ScoringConfig = Field(default_factory=ScoringConfig, description="Scoring settings")
    regions: RegionConfig = Field(default_factory=RegionConfig, description="Region adjacency")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    language: Language = Field(Language.UZ, description="Default display language")

    model_config = {"use_enum_values": True, "validate_default": True}

    @model_validator(mode="after")
    def validate_threshold(self):
        """The strong-match threshold must be reachable."""
        weights = self.scoring.weights
        reachable = (
            weights.region
            + weights.district
            + weights.category
            + weights.salary
            + weights.experience
            + weights.gender
            + weights.age
            + weights.education
            + weights.title
        )
        if self.scoring.strong_match_threshold > reachable:
            raise ValueError(
                f"strong_match_threshold ({self.scoring.strong_match_threshold}) exceeds "
                f"the maximum reachable score ({reachable})"
            )
        return self
