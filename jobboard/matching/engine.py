"""Match scoring engine for ranking vacancies against a job seeker profile.

This module implements the additive scoring rules:
1. Location: same region, else neighbor region or remote vacancy
2. District: same district (string comparison)
3. Category: vacancy category accepted by the profile
4. Gender: profile gender meets the vacancy requirement
5. Age: profile age within the vacancy age range
6. Education: profile has at least the required education level
7. Salary: offered salary meets the expected minimum
8. Experience: profile has at least the required experience
9. Title: wanted position relevant to the vacancy title (scaled)

A factor only appears in the breakdown when both sides provide the data it
compares. Missing data is neutral: it neither adds nor removes points.
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from jobboard.config.models import ScoringConfig
from jobboard.domain.models import JobPosting, JobSeekerProfile
from jobboard.domain.regions import DEFAULT_ADJACENCY, RegionAdjacency
from jobboard.logging import get_logger
from jobboard.normalization.demographics import GENDER_ANY, GENDER_OTHER, age_from_birth_date
from jobboard.normalization.titles import is_generic_title, title_similarity
from jobboard.utils.coercion import identifiers_equal, round_half_up

from .models import MatchResult

logger = get_logger(__name__, component="matching")

ProfileInput = Union[JobSeekerProfile, Mapping[str, Any]]
JobInput = Union[JobPosting, Mapping[str, Any]]


class MatchScorer:
    """Scores job postings against a job seeker profile.

    Responsibilities:
    - Coerce raw records into immutable profile/posting models
    - Award points per factor using configured weights
    - Record per-factor contributions for explainability
    - Rank a batch of postings by score
    """

    def __init__(
        self,
        scoring_config: Optional[ScoringConfig] = None,
        adjacency: Optional[RegionAdjacency] = None,
        logger_instance: Optional[logging.Logger] = None,
        today: Optional[date] = None,
    ):
        """Initialize MatchScorer.

        Args:
            scoring_config: Weights and thresholds (defaults to ScoringConfig())
            adjacency: Region adjacency table (defaults to the built-in borders)
            logger_instance: Optional logger instance (defaults to module logger)
            today: Date ages are computed on (defaults to the current date)
        """
        self.scoring_config = scoring_config or ScoringConfig()
        self.weights = self.scoring_config.weights
        self.adjacency = adjacency or DEFAULT_ADJACENCY
        self.logger = logger_instance or logger
        self.today = today

    def score(self, profile: ProfileInput, job: JobInput) -> MatchResult:
        """Score a single job against a profile.

        Args:
            profile: JobSeekerProfile or mapping with profile fields
            job: JobPosting or mapping with vacancy fields

        Returns:
            MatchResult with total score and per-factor breakdown

        Raises:
            InvalidRecordError: If either record is not a mapping/model
        """
        profile = JobSeekerProfile.from_record(profile)
        job = JobPosting.from_record(job)

        breakdown: Dict[str, int] = {}
        self._score_location(profile, job, breakdown)
        self._score_district(profile, job, breakdown)
        self._score_category(profile, job, breakdown)
        self._score_gender(profile, job, breakdown)
        self._score_age(profile, job, breakdown)
        self._score_education(profile, job, breakdown)
        self._score_salary(profile, job, breakdown)
        self._score_experience(profile, job, breakdown)
        self._score_title(profile, job, breakdown)

        result = MatchResult(
            job_id=job.id,
            match_score=sum(breakdown.values()),
            breakdown=breakdown,
            strong_match_threshold=self.scoring_config.strong_match_threshold,
        )

        self.logger.debug(
            f"Scored job {job.id}",
            extra={
                "event": "matching.job.scored",
                "job_id": job.id,
                "match_score": result.match_score,
                "matched_factors": result.matched_factors,
            },
        )

        return result

    def rank(
        self,
        profile: ProfileInput,
        jobs: Iterable[JobInput],
        min_score: int = 0,
        limit: Optional[int] = None,
        strict: Optional[bool] = None,
    ) -> List[MatchResult]:
        """Score and sort jobs, best match first.

        Ties keep their input order.

        Args:
            profile: Job seeker profile
            jobs: Iterable of postings
            min_score: Drop results scoring below this value
            limit: Keep at most this many results (None = all)
            strict: Drop jobs failing a stated requirement (None = use
                scoring_config.strict_filtering)

        Returns:
            List of MatchResult sorted by match_score descending
        """
        profile = JobSeekerProfile.from_record(profile)
        postings = [JobPosting.from_record(job) for job in jobs]
        if strict is None:
            strict = self.scoring_config.strict_filtering

        results = []
        rejected = 0
        for job in postings:
            if strict and not self.meets_requirements(profile, job):
                rejected += 1
                continue
            results.append(self.score(profile, job))
        total = len(postings)

        ranked = sorted(
            (result for result in results if result.match_score >= min_score),
            key=lambda result: result.match_score,
            reverse=True,
        )
        if limit is not None:
            ranked = ranked[: max(limit, 0)]

        self.logger.info(
            f"Ranked {total} jobs, {len(ranked)} kept",
            extra={
                "event": "matching.rank.completed",
                "jobs_total": total,
                "jobs_kept": len(ranked),
                "strong_matches": len([r for r in ranked if r.is_strong_match]),
                "min_score": min_score,
                "strict": strict,
                "jobs_rejected": rejected,
            },
        )

        return ranked

    def meets_requirements(self, profile: JobSeekerProfile, job: JobPosting) -> bool:
        """Whether a job passes strict filtering.

        A job fails when a gender, age, education or experience requirement
        was compared and not met. When the profile names a specific title,
        a job whose title is less relevant than min_title_relevance fails
        too. Requirements the job does not state never reject it.
        """
        checks = (
            self._gender_fits(profile, job),
            self._age_fits(profile, job),
            self._education_fits(profile, job),
            self._experience_fits(profile, job),
        )
        if any(check is False for check in checks):
            return False

        if profile.title and not is_generic_title(profile.title) and job.display_title:
            relevance = title_similarity(profile.title, job.display_title)
            if relevance < self.scoring_config.min_title_relevance:
                return False

        return True

    def _score_location(
        self, profile: JobSeekerProfile, job: JobPosting, breakdown: Dict[str, int]
    ) -> None:
        if identifiers_equal(profile.region_id, job.region_id):
            breakdown["region"] = self.weights.region
            return

        both_known = profile.region_id is not None and job.region_id is not None

        bonuses = []
        if both_known and self.adjacency.are_neighbors(profile.region_id, job.region_id):
            bonuses.append(("neighbor_region", self.weights.neighbor_region))
        if job.is_remote:
            bonuses.append(("remote", self.weights.remote))

        if bonuses:
            name, points = max(bonuses, key=lambda bonus: bonus[1])
            breakdown[name] = points
        elif both_known:
            breakdown["region"] = 0

    def _score_district(
        self, profile: JobSeekerProfile, job: JobPosting, breakdown: Dict[str, int]
    ) -> None:
        if profile.district_id is None or job.district_id is None:
            return
        matched = identifiers_equal(profile.district_id, job.district_id)
        breakdown["district"] = self.weights.district if matched else 0

    def _score_category(
        self, profile: JobSeekerProfile, job: JobPosting, breakdown: Dict[str, int]
    ) -> None:
        categories = profile.accepted_categories
        if not categories or job.category_id is None:
            return
        matched = any(identifiers_equal(category, job.category_id) for category in categories)
        breakdown["category"] = self.weights.category if matched else 0

    def _score_salary(
        self, profile: JobSeekerProfile, job: JobPosting, breakdown: Dict[str, int]
    ) -> None:
        expected = profile.expected_salary_min
        if expected is None or (job.salary_min is None and job.salary_max is None):
            return

        if job.salary_min is not None and job.salary_min >= expected:
            breakdown["salary"] = self.weights.salary
        elif job.salary_max is not None and job.salary_max >= expected:
            breakdown["salary"] = self.weights.salary_partial
        else:
            breakdown["salary"] = 0

    def _score_gender(
        self, profile: JobSeekerProfile, job: JobPosting, breakdown: Dict[str, int]
    ) -> None:
        fits = self._gender_fits(profile, job)
        if fits is not None:
            breakdown["gender"] = self.weights.gender if fits else 0

    def _score_age(
        self, profile: JobSeekerProfile, job: JobPosting, breakdown: Dict[str, int]
    ) -> None:
        fits = self._age_fits(profile, job)
        if fits is not None:
            breakdown["age"] = self.weights.age if fits else 0

    def _score_education(
        self, profile: JobSeekerProfile, job: JobPosting, breakdown: Dict[str, int]
    ) -> None:
        fits = self._education_fits(profile, job)
        if fits is not None:
            breakdown["education"] = self.weights.education if fits else 0

    def _score_experience(
        self, profile: JobSeekerProfile, job: JobPosting, breakdown: Dict[str, int]
    ) -> None:
        fits = self._experience_fits(profile, job)
        if fits is not None:
            breakdown["experience"] = self.weights.experience if fits else 0

    def _score_title(
        self, profile: JobSeekerProfile, job: JobPosting, breakdown: Dict[str, int]
    ) -> None:
        if not profile.title or not job.display_title:
            return
        relevance = title_similarity(profile.title, job.display_title)
        breakdown["title"] = round_half_up(relevance * self.weights.title)

    # Requirement checks return None when either side states nothing.

    def _gender_fits(self, profile: JobSeekerProfile, job: JobPosting) -> Optional[bool]:
        if job.gender in (None, GENDER_ANY, GENDER_OTHER):
            return None
        if profile.gender in (None, GENDER_ANY):
            return None
        return profile.gender == job.gender

    def _age_fits(self, profile: JobSeekerProfile, job: JobPosting) -> Optional[bool]:
        if job.age_min is None and job.age_max is None:
            return None
        age = age_from_birth_date(profile.birth_date, today=self.today)
        if age is None:
            return None
        if job.age_min is not None and age < job.age_min:
            return False
        if job.age_max is not None and age > job.age_max:
            return False
        return True

    def _education_fits(self, profile: JobSeekerProfile, job: JobPosting) -> Optional[bool]:
        if not job.education_level or profile.education_level is None:
            return None
        return profile.education_level >= job.education_level

    def _experience_fits(self, profile: JobSeekerProfile, job: JobPosting) -> Optional[bool]:
        required = job.experience_code
        available = profile.experience_code
        if required is None or available is None:
            return None
        # Canonical codes are ordered buckets "1".."5".
        return int(available) >= int(required)


_default_scorer = MatchScorer()


def calculate_match_score(profile: ProfileInput, job: JobInput) -> MatchResult:
    """Score a job against a profile using the default weights.

    Example:
        >>> result = calculate_match_score({"region_id": 1}, {"id": "job-1", "region_id": 1})
        >>> result.breakdown
        {'region': 50}
    """
    return _default_scorer.score(profile, job)
