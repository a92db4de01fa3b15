"""Utility functions for presenting match results.

This module provides helpers for ranking a batch of vacancies, turning a
breakdown into a localized explanation, and building the payload consumed
by the UI and the bot.
"""

from typing import Dict, Iterable, List, Optional

from jobboard.utils.coercion import round_half_up

from .engine import JobInput, MatchScorer, ProfileInput, _default_scorer
from .models import MatchResult

FACTOR_REASONS: Dict[str, Dict[str, str]] = {
    "region": {"uz": "Joylashuv mos", "ru": "Локация подходит"},
    "neighbor_region": {"uz": "Qo'shni hudud", "ru": "Соседний регион"},
    "remote": {"uz": "Masofaviy ish", "ru": "Удалённая работа"},
    "district": {"uz": "Tuman mos", "ru": "Район подходит"},
    "category": {"uz": "Soha mos", "ru": "Сфера подходит"},
    "gender": {"uz": "Jins mos", "ru": "Пол подходит"},
    "age": {"uz": "Yosh mos", "ru": "Возраст подходит"},
    "education": {"uz": "Ma'lumot mos", "ru": "Образование подходит"},
    "salary": {"uz": "Maosh mos", "ru": "Зарплата подходит"},
    "experience": {"uz": "Tajriba mos", "ru": "Опыт подходит"},
    "title": {"uz": "Lavozim mos", "ru": "Должность подходит"},
}


def match_percentage(score: float) -> int:
    """Clamp a score into 0..100 for display, rounding halves up."""
    return max(0, min(100, round_half_up(score)))


def explain_match(match_result: MatchResult, lang: str = "uz") -> str:
    """Describe the matched factors in the requested language.

    Args:
        match_result: MatchResult to explain
        lang: "uz" or "ru" (anything other than "uz" renders Russian)

    Returns:
        Comma-separated reasons, e.g. "Joylashuv mos, Soha mos"
    """
    key = "uz" if lang == "uz" else "ru"
    reasons = [
        FACTOR_REASONS[factor][key]
        for factor in match_result.matched_factors
        if factor in FACTOR_REASONS
    ]
    return ", ".join(reasons)


def build_match_payload(match_result: MatchResult, lang: str = "uz") -> Dict:
    """Build the payload shown next to a vacancy.

    Returns:
        Dict with keys:
        - job_id: Vacancy identifier
        - match_score: Raw score
        - match_percentage: Score clamped to 0..100
        - breakdown: Factor name -> points
        - match_quality: strong / partial / none
        - explanation: Localized reasons
    """
    payload = match_result.to_dict()
    payload["match_percentage"] = match_percentage(match_result.match_score)
    payload["explanation"] = explain_match(match_result, lang)
    return payload


def rank_jobs(
    profile: ProfileInput,
    jobs: Iterable[JobInput],
    min_score: int = 0,
    limit: Optional[int] = None,
    scorer: Optional[MatchScorer] = None,
    strict: Optional[bool] = None,
) -> List[MatchResult]:
    """Rank jobs for a profile, best match first.

    Uses the default scorer unless one is supplied.
    """
    return (scorer or _default_scorer).rank(
        profile, jobs, min_score=min_score, limit=limit, strict=strict
    )
