"""Match scoring engine for ranking vacancies against job seeker profiles.

This module provides:
- MatchResult: Score and per-factor breakdown for one job
- MatchScorer: Service scoring and ranking jobs with configured weights
- calculate_match_score: Scoring with the default weights
- Utility functions for ranking and presenting results
"""

from .engine import MatchScorer, calculate_match_score
from .models import DEFAULT_STRONG_MATCH_THRESHOLD, MatchResult
from .utils import (
    FACTOR_REASONS,
    build_match_payload,
    explain_match,
    match_percentage,
    rank_jobs,
)

__all__ = [
    "MatchScorer",
    "MatchResult",
    "DEFAULT_STRONG_MATCH_THRESHOLD",
    "calculate_match_score",
    "rank_jobs",
    "explain_match",
    "match_percentage",
    "build_match_payload",
    "FACTOR_REASONS",
]
