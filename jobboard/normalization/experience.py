"""Experience code canonicalization.

Experience requirements arrive as free-form values: legacy numeric codes from
the imported vacancy feed, snake_case keys from the web forms, and Uzbek or
Russian labels typed by employers. Everything is folded onto five canonical
buckets:

- "1": no experience
- "2": up to 1 year
- "3": 1-3 years
- "4": 3-5 years
- "5": 5+ years
"""

from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from jobboard.utils.coercion import coerce_identifier, coerce_number, round_half_up

CANONICAL_CODES: Tuple[str, ...] = ("1", "2", "3", "4", "5")

NO_EXPERIENCE = "1"

EXPERIENCE_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "1": ("1", "0", "no_experience", "tajribasiz", "без опыта", "talab etilmaydi"),
        "2": ("2", "1_year", "1 yil", "1 год", "1 yilgacha", "до 1 года"),
        "3": ("3", "3_years", "1_3_years", "1-3 yil", "1-3 года"),
        "4": ("4", "5_years", "3_5_years", "3-5 yil", "3-5 лет"),
        "5": ("5", "10_years", "5_plus", "5+ yil", "5+ лет", "5 yildan ortiq"),
    }
)

EXPERIENCE_LABELS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "1": MappingProxyType({"uz": "Tajribasiz", "ru": "Без опыта"}),
        "2": MappingProxyType({"uz": "1 yil", "ru": "1 год"}),
        "3": MappingProxyType({"uz": "1-3 yil", "ru": "1-3 года"}),
        "4": MappingProxyType({"uz": "3-5 yil", "ru": "3-5 лет"}),
        "5": MappingProxyType({"uz": "5+ yil", "ru": "5+ лет"}),
    }
)


def _lang_key(lang: Optional[str]) -> str:
    return "uz" if lang == "uz" else "ru"


def normalize_experience_code(value: Any) -> Optional[str]:
    """Map an experience value onto its canonical bucket code.

    Args:
        value: Alias string, legacy numeric code, or None

    Returns:
        One of "1".."5", or None when the value is not recognized

    Example:
        >>> normalize_experience_code("3-5 yil")
        '4'
        >>> normalize_experience_code("no_experience")
        '1'
    """
    raw = coerce_identifier(value)
    if raw is None:
        return None
    raw = raw.lower()

    for canonical, aliases in EXPERIENCE_ALIASES.items():
        if raw in aliases:
            return canonical

    if raw in CANONICAL_CODES:
        return raw
    return None


def expand_experience_filter_values(value: Any) -> List[str]:
    """Return every stored spelling of the bucket ``value`` belongs to.

    Used to build inclusive filters over columns holding free-form
    experience data. Unknown values are returned unchanged as a
    single-element list.
    """
    code = normalize_experience_code(value)
    if code is None:
        return [value]
    return list(EXPERIENCE_ALIASES[code])


def experience_code_from_years(years: Any) -> Optional[str]:
    """Bucket a numeric number of years into a canonical code."""
    number = coerce_number(years)
    if number is None:
        return None
    if number <= 0:
        return "1"
    if number <= 1:
        return "2"
    if number <= 3:
        return "3"
    if number <= 5:
        return "4"
    return "5"


def get_experience_label(value: Any, years: Any = None, lang: str = "uz") -> str:
    """Build a display label for an experience requirement.

    An explicit positive number of years wins ("3 yil" / "3 лет"); otherwise
    the canonical bucket label is used, falling back to the "no experience"
    label of the requested language.

    Args:
        value: Experience code or alias
        years: Optional numeric years
        lang: "uz" or "ru" (anything other than "uz" renders Russian)

    Returns:
        Localized label
    """
    key = _lang_key(lang)

    number = coerce_number(years)
    if number is not None and number > 0:
        rounded = round_half_up(number)
        return f"{rounded} yil" if key == "uz" else f"{rounded} лет"

    code = normalize_experience_code(value)
    if code is not None:
        return EXPERIENCE_LABELS[code][key]

    return EXPERIENCE_LABELS[NO_EXPERIENCE][key]
