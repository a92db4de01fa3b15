"""Normalization helpers feeding the match scorer.

This module provides:
- Experience code canonicalization, filter expansion and display labels
- Gender and education codes, birth dates and age limits
- Job title tokens and title relevance
- Vacancy text cleanup and location name normalization
"""

from .demographics import (
    EDUCATION_ANY,
    EDUCATION_HIGHER,
    EDUCATION_MASTER,
    EDUCATION_SECONDARY,
    EDUCATION_VOCATIONAL,
    GENDER_ANY,
    GENDER_FEMALE,
    GENDER_MALE,
    GENDER_OTHER,
    age_from_birth_date,
    coerce_age_limit,
    normalize_education,
    normalize_gender,
    parse_birth_date,
)
from .experience import (
    CANONICAL_CODES,
    EXPERIENCE_ALIASES,
    EXPERIENCE_LABELS,
    NO_EXPERIENCE,
    expand_experience_filter_values,
    experience_code_from_years,
    get_experience_label,
    normalize_experience_code,
)
from .text import MIN_TEXT_LENGTH, clean_job_text, normalize_location
from .titles import (
    is_generic_title,
    normalize_title_tokens,
    title_similarity,
    tokenize_title,
)

__all__ = [
    # Experience
    "CANONICAL_CODES",
    "EXPERIENCE_ALIASES",
    "EXPERIENCE_LABELS",
    "NO_EXPERIENCE",
    "normalize_experience_code",
    "expand_experience_filter_values",
    "experience_code_from_years",
    "get_experience_label",
    # Demographics
    "GENDER_MALE",
    "GENDER_FEMALE",
    "GENDER_ANY",
    "GENDER_OTHER",
    "EDUCATION_ANY",
    "EDUCATION_SECONDARY",
    "EDUCATION_VOCATIONAL",
    "EDUCATION_HIGHER",
    "EDUCATION_MASTER",
    "normalize_gender",
    "normalize_education",
    "parse_birth_date",
    "age_from_birth_date",
    "coerce_age_limit",
    # Titles
    "tokenize_title",
    "is_generic_title",
    "normalize_title_tokens",
    "title_similarity",
    # Text
    "MIN_TEXT_LENGTH",
    "clean_job_text",
    "normalize_location",
]
