"""Domain models for job board match scoring."""

from .exceptions import InvalidRecordError, JobboardError
from .models import JobPosting, JobSeekerProfile
from .regions import DEFAULT_ADJACENCY, REGION_NAMES, RegionAdjacency, region_name

__all__ = [
    "JobSeekerProfile",
    "JobPosting",
    "JobboardError",
    "InvalidRecordError",
    "RegionAdjacency",
    "DEFAULT_ADJACENCY",
    "REGION_NAMES",
    "region_name",
]
