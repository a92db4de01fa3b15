"""Job board match scoring.

Scores how well a vacancy fits a job seeker profile and provides the
normalization helpers the scorer relies on.
"""

from jobboard.domain import JobPosting, JobSeekerProfile
from jobboard.matching import MatchResult, MatchScorer, calculate_match_score, rank_jobs
from jobboard.normalization import (
    clean_job_text,
    expand_experience_filter_values,
    get_experience_label,
    normalize_experience_code,
    normalize_location,
)

__version__ = "1.0.0"

__all__ = [
    "JobSeekerProfile",
    "JobPosting",
    "MatchResult",
    "MatchScorer",
    "calculate_match_score",
    "rank_jobs",
    "normalize_experience_code",
    "expand_experience_filter_values",
    "get_experience_label",
    "clean_job_text",
    "normalize_location",
]
