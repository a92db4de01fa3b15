"""Gender, education and age normalization.

Vacancies imported from the labour exchange store gender and education as
numeric codes, while employers on the web forms pick Uzbek or Russian
labels. This module folds both onto comparable values:

- Gender: "male", "female", "any" (no requirement) or "other"
- Education: ordered levels 0..4 (any, secondary, vocational, higher, master)
- Age: whole years computed from a birth date
"""

import re
from datetime import date, datetime
from typing import Any, Optional

from jobboard.utils.coercion import coerce_identifier, coerce_number

GENDER_MALE = "male"
GENDER_FEMALE = "female"
GENDER_ANY = "any"
GENDER_OTHER = "other"

_GENDER_ALIASES = {
    GENDER_MALE: frozenset({"1", "male", "erkak", "мужской"}),
    GENDER_FEMALE: frozenset({"2", "female", "ayol", "женский"}),
    GENDER_ANY: frozenset({"3", "any", "ahamiyatsiz", "любое", "любой", "не важно"}),
}

EDUCATION_ANY = 0
EDUCATION_SECONDARY = 1
EDUCATION_VOCATIONAL = 2
EDUCATION_HIGHER = 3
EDUCATION_MASTER = 4

_EDUCATION_KEYS = {
    "any": EDUCATION_ANY,
    "orta": EDUCATION_SECONDARY,
    "orta maxsus": EDUCATION_VOCATIONAL,
    "oliy": EDUCATION_HIGHER,
    "master": EDUCATION_MASTER,
}
_EDUCATION_ANY_LABELS = frozenset({"any", "ahamiyatsiz", "не важно", "любой", "любой уровень"})

_APOSTROPHES_RE = re.compile(r"[\u2018\u2019\u02bc\u02bb`']")
_SEPARATORS_RE = re.compile(r"[-_]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_gender(value: Any) -> Optional[str]:
    """Map a gender code or label onto a canonical value.

    Returns:
        "male", "female", "any", "other" for unrecognized values, or None
        when nothing was given

    Example:
        >>> normalize_gender(2)
        'female'
        >>> normalize_gender("Ahamiyatsiz")
        'any'
    """
    raw = coerce_identifier(value)
    if raw is None:
        return None
    raw = raw.lower()

    for gender, aliases in _GENDER_ALIASES.items():
        if raw in aliases:
            return gender
    return GENDER_OTHER


def normalize_education(value: Any) -> int:
    """Map an education code or label onto an ordered level.

    Numeric codes are clamped into 0..4. Labels are matched by keyword in
    both locales, so "O'rta maxsus", "orta_maxsus" and "среднее специальное"
    all give the vocational level. Unknown or missing values give 0.
    """
    if value is None or isinstance(value, bool):
        return EDUCATION_ANY

    number = value if isinstance(value, (int, float)) else None
    if number is None and isinstance(value, str) and value.strip().isdigit():
        number = int(value.strip())
    if number is not None:
        if number <= 0:
            return EDUCATION_ANY
        if number >= 4:
            return EDUCATION_MASTER
        if number == 3:
            return EDUCATION_HIGHER
        if number == 2:
            return EDUCATION_VOCATIONAL
        return EDUCATION_SECONDARY

    key = _APOSTROPHES_RE.sub("", str(value).lower())
    key = _SEPARATORS_RE.sub(" ", key)
    key = _WHITESPACE_RE.sub(" ", key).strip()

    if not key or key in _EDUCATION_ANY_LABELS:
        return EDUCATION_ANY
    if "magistr" in key or "master" in key or "магистр" in key:
        return EDUCATION_MASTER
    if "oliy" in key or "higher" in key or "высш" in key:
        return EDUCATION_HIGHER

    has_orta = "orta" in key or "o rta" in key
    has_maxsus = "maxsus" in key or "spets" in key or "специаль" in key
    has_secondary = has_orta or "secondary" in key or "средн" in key
    if has_secondary and has_maxsus:
        return EDUCATION_VOCATIONAL
    if "vocational" in key:
        return EDUCATION_VOCATIONAL
    if has_secondary:
        return EDUCATION_SECONDARY
    return _EDUCATION_KEYS.get(key, EDUCATION_ANY)


def parse_birth_date(value: Any) -> Optional[date]:
    """Parse a birth date.

    Accepts date/datetime objects, "DD.MM.YYYY" as typed in the bot, and
    ISO 8601 strings ("YYYY-MM-DD", optionally with a time part).

    Returns:
        date, or None if the value cannot be parsed
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None

    try:
        if "." in text:
            parts = [part.strip() for part in text.split(".")]
            if len(parts) == 3:
                day, month, year = (int(part) for part in parts)
                return date(year, month, day)
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def age_from_birth_date(value: Any, today: Optional[date] = None) -> Optional[int]:
    """Age in whole years on ``today`` (defaults to the current date).

    Example:
        >>> age_from_birth_date("15.06.2000", today=date(2025, 6, 14))
        24
    """
    birth_date = parse_birth_date(value)
    if birth_date is None:
        return None

    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age if age >= 0 else None


def coerce_age_limit(value: Any) -> Optional[int]:
    """Parse an age bound; zero, negative or unparseable bounds mean none."""
    number = coerce_number(value)
    if number is None or number <= 0:
        return None
    return int(number)
