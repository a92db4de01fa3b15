"""Text cleanup for imported vacancy descriptions and location names.

Imported vacancies carry HTML fragments, entity-encoded whitespace and
template sections that the employer never filled in. Location names carry
administrative suffixes ("vil.", "обл.") that only add noise to the UI.
"""

import html
import re
from typing import Optional

MIN_TEXT_LENGTH = 5

SECTION_LABELS = r"(?:Vazifalar|Talablar|Sharh|Imkoniyatlar)"

_TAG_RE = re.compile(r"<[^>]*>")
_EMPTY_SECTION_DASHES_RE = re.compile(
    SECTION_LABELS + r":\s*[-–—]\s*[-–—]", re.IGNORECASE
)
_EMPTY_SECTION_EOL_RE = re.compile(SECTION_LABELS + r":[ \t\r]*$", re.IGNORECASE | re.MULTILINE)
_WHITESPACE_RE = re.compile(r"\s+")

# A suffix token becomes a single space; a comma that follows it stays as
# the separator and a name glued to it ("vil.Andijon") is split off.
_REGION_SUFFIX_RE = re.compile(r"\s*(?<!\w)(?:vil|обл)\.", re.IGNORECASE)


def clean_job_text(text: Optional[str]) -> str:
    """Clean a vacancy description for display.

    Steps:
    1. Decode HTML entities (&nbsp; -> NBSP, &amp; -> &)
    2. Replace HTML tags with spaces
    3. Replace non-breaking spaces
    4. Drop empty template sections ("Talablar: - -", trailing "Vazifalar:")
    5. Collapse whitespace and trim

    Args:
        text: Raw description (may be None)

    Returns:
        Cleaned text, or "" when fewer than MIN_TEXT_LENGTH characters remain
    """
    if not text:
        return ""

    cleaned = html.unescape(str(text))
    cleaned = _TAG_RE.sub(" ", cleaned)
    cleaned = cleaned.replace("\u00a0", " ")

    cleaned = _EMPTY_SECTION_DASHES_RE.sub("", cleaned)
    cleaned = _EMPTY_SECTION_EOL_RE.sub("", cleaned)

    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()

    if len(cleaned) < MIN_TEXT_LENGTH:
        return ""

    return cleaned


def normalize_location(name: Optional[str]) -> str:
    """Strip region suffixes and tidy separators in a location name.

    Example:
        >>> normalize_location("Andijon vil., Andijon sh.")
        'Andijon, Andijon sh.'
    """
    if not name:
        return ""

    cleaned = _REGION_SUFFIX_RE.sub(" ", str(name))

    cleaned = re.sub(r"\s+,", ",", cleaned)
    cleaned = re.sub(r",(?:\s*,)+", ",", cleaned)
    cleaned = re.sub(r"\s{2,}", " ", cleaned)
    cleaned = re.sub(r"^[\s,]+", "", cleaned)
    cleaned = re.sub(r"[\s,]+$", "", cleaned)

    return cleaned.strip()
