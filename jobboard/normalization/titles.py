"""Job title tokenization and relevance.

Job seekers describe the position they want in free text ("Dasturchi",
"Frontend developer", "Бухгалтер"); vacancies carry titles in Uzbek or
Russian. Titles are reduced to tokens, filler words are dropped and common
synonyms are folded onto one English key before comparison.
"""

import re
from typing import List, Optional

MIN_TOKEN_LENGTH = 3

GENERIC_TITLE_TOKENS = frozenset(
    {"mutaxassis", "ishchi", "xodim", "employee", "specialist", "worker", "operator"}
)

TITLE_STOPWORDS = frozenset(
    {
        "uchun", "boyicha", "bilan", "va", "ish", "lavozim", "xodim",
        "mutaxassis", "specialist", "worker", "employee", "vakansiya", "vacancy",
        "bo", "yicha",
    }
)

TITLE_SYNONYMS = {
    "dasturchi": "developer",
    "developer": "developer",
    "programmist": "developer",
    "frontend": "frontend",
    "backend": "backend",
    "buxgalter": "accountant",
    "hisobchi": "accountant",
    "accountant": "accountant",
    "sotuvchi": "sales",
    "sales": "sales",
    "marketolog": "marketing",
    "marketing": "marketing",
    "smm": "smm",
    "recruiter": "hr",
    "operator": "operator",
    "callcenter": "operator",
    "call": "operator",
    "support": "support",
    "menejer": "manager",
    "manager": "manager",
    "direktor": "director",
    "director": "director",
    "rahbar": "manager",
    "boshqaruvchi": "manager",
    "haydovchi": "driver",
    "driver": "driver",
    "oshpaz": "cook",
    "cook": "cook",
    "shifokor": "doctor",
    "doctor": "doctor",
    "hamshira": "nurse",
    "nurse": "nurse",
    "oqituvchi": "teacher",
    "teacher": "teacher",
    "yurist": "lawyer",
    "lawyer": "lawyer",
    "tozalovchi": "cleaner",
    "uborshchik": "cleaner",
    "cleaner": "cleaner",
}

# Substring match on the raw titles adds this much on top of token overlap.
CONTAINS_BOOST = 0.2

_APOSTROPHES_RE = re.compile(r"[\u2018\u2019\u02bc\u02bb`']")
_NON_TOKEN_RE = re.compile(r"[^a-z\u0400-\u04ff0-9\s]")


def tokenize_title(value: Optional[str]) -> List[str]:
    """Lower-case a title and split it into tokens of at least three characters.

    Apostrophes are dropped ("O'qituvchi" -> "oqituvchi"); other punctuation
    separates tokens.
    """
    if not value:
        return []
    cleaned = _APOSTROPHES_RE.sub("", str(value).lower())
    cleaned = _NON_TOKEN_RE.sub(" ", cleaned)
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]


def is_generic_title(value: Optional[str]) -> bool:
    """Whether a title says nothing specific ("Xodim", "Specialist", empty)."""
    tokens = tokenize_title(value)
    if not tokens:
        return True
    return len(tokens) == 1 and tokens[0] in GENERIC_TITLE_TOKENS


def normalize_title_tokens(value: Optional[str]) -> List[str]:
    """Tokens with stopwords removed and synonyms folded."""
    return [
        TITLE_SYNONYMS.get(token, token)
        for token in tokenize_title(value)
        if token not in TITLE_STOPWORDS
    ]


def title_similarity(profile_title: Optional[str], job_title: Optional[str]) -> float:
    """Relevance of a vacancy title to the wanted position, in 0..1.

    Token overlap is measured against the larger token set; a title that
    contains the other one verbatim gets CONTAINS_BOOST on top.

    Example:
        >>> title_similarity("Dasturchi", "Python developer")
        0.5
    """
    profile_tokens = set(normalize_title_tokens(profile_title))
    job_tokens = set(normalize_title_tokens(job_title))
    if not profile_tokens or not job_tokens:
        return 0.0

    overlap = len(profile_tokens & job_tokens) / max(len(profile_tokens), len(job_tokens))

    profile_text = str(profile_title).lower()
    job_text = str(job_title).lower()
    contains = profile_text in job_text or job_text in profile_text
    boost = CONTAINS_BOOST if contains else 0.0

    return max(0.0, min(1.0, overlap + boost))
