"""Data models for the matching engine."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEFAULT_STRONG_MATCH_THRESHOLD = 50


@dataclass
class MatchResult:
    """Result of scoring one job against one profile.

    Attributes:
        job_id: Identifier of the scored job (None if the record had none)
        match_score: Sum of all factor contributions (not clamped above)
        breakdown: Factor name -> points. A factor is present only when both
            sides supplied the data it compares; 0 means it was compared and
            did not match.
        strong_match_threshold: Score at which a match counts as strong
    """

    job_id: Optional[str]
    match_score: int
    breakdown: Dict[str, int] = field(default_factory=dict)
    strong_match_threshold: int = DEFAULT_STRONG_MATCH_THRESHOLD

    @property
    def matched_factors(self) -> List[str]:
        """Factors that contributed points, in evaluation order."""
        return [name for name, points in self.breakdown.items() if points > 0]

    @property
    def is_strong_match(self) -> bool:
        return self.match_score >= self.strong_match_threshold

    @property
    def match_quality(self) -> str:
        """Return a description of match quality.

        Returns:
            "strong" if the score reaches the strong-match threshold,
            "partial" if some factor contributed,
            "none" otherwise
        """
        if self.is_strong_match:
            return "strong"
        if self.match_score > 0:
            return "partial"
        return "none"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON consumers."""
        return {
            "job_id": self.job_id,
            "match_score": self.match_score,
            "breakdown": dict(self.breakdown),
            "match_quality": self.match_quality,
        }
