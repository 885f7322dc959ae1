"""
Rule-based field extractors.

Each extractor is a pure function over the raw utterance and never raises.
Two strategies are used on purpose and must not be unified:

- **First match wins** (name, age, job, phone): patterns are tried in
  priority order and the first acceptable hit is the answer.
- **Accumulate** (kids, siblings, likes, dislikes): every pattern runs and
  all hits are collected, in pattern order.

Trigger words are matched case-insensitively; captured person names must
be capitalized so that ordinary words are not mistaken for names.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from armi_nlu.schemas.profile import MAX_AGE, UNKNOWN_PERSON, Relationship, Sentiment
from armi_nlu.services import lexicons

RuleHandler = Callable[[re.Match], list[str]]

_NAME = r"[A-Z][a-z]+"
_NAME_LIST = rf"{_NAME}(?:(?:\s*,\s*|\s+and\s+){_NAME})*"
_TIME = r"yesterday|today|tomorrow|last|this|morning|afternoon|evening|night"
_PLACE_SUFFIX = (
    r"street|avenue|road|drive|way|place|city|state|country|university|college"
    r"|school|company|inc|llc|corp"
)
_APOS = r"[’']"

# Longest digit run read as an age or a head count
MAX_COUNT_DIGITS = 3


# ── Name ─────────────────────────────────────────────────────────

NAME_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Meeting / speaking verbs: "met Sarah", "ran into Tom"
    re.compile(
        rf"\b(?i:met|talked\s+to|saw|bumped\s+into|spoke\s+with|chatted\s+with|ran\s+into)"
        rf"\s+({_NAME})\b(?!\s+(?i:{_TIME})\b)"
    ),
    # "me and Jake", unless an activity verb follows
    re.compile(rf"\b(?i:me|i)\s+(?i:and)\s+({_NAME})\b(?!\s+(?i:went|met|saw|talked)\b)"),
    # "my coworker Mike"
    re.compile(
        r"\b(?i:my|our)\s+(?i:friend|coworker|colleague|neighbor|sister|brother|cousin"
        rf"|mom|dad|mother|father)\s+({_NAME})\b"
    ),
    # "Jess is ...", "Tom works ..."
    re.compile(rf"\b({_NAME})\s+(?i:is|was|has|works|got|just|recently|who)\b"),
    # "Ana's birthday"
    re.compile(rf"\b({_NAME}){_APOS}s\s+(?i:birthday|job|house|car|phone|email)\b"),
    # "lunch with Priya"
    re.compile(rf"\b(?i:with)\s+({_NAME})\b(?!\s+(?i:{_TIME}|me|us|them)\b)"),
    # Any capitalized word of three letters or more
    re.compile(rf"\b([A-Z][a-z]{{2,}})\b(?!\s+(?i:{_TIME}|{_PLACE_SUFFIX})\b)"),
)


def _acceptable_name(token: str) -> bool:
    return len(token) > 1 and token.lower() not in lexicons.NAME_EXCLUSIONS


def extract_name(text: str) -> str:
    """Return the most reliable person name in ``text``, or ``"Unknown Person"``."""
    for pattern in NAME_PATTERNS:
        for match in pattern.finditer(text):
            if _acceptable_name(match.group(1)):
                return match.group(1)
    return UNKNOWN_PERSON


# ── Age ──────────────────────────────────────────────────────────

AGE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        rf"\b(?:she{_APOS}s|he{_APOS}s|they{_APOS}re|is)\s+(?:about|around|probably)?\s*(\d+)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(\d+)\s+years?\s+old\b", re.IGNORECASE),
    re.compile(r"\b(\d+)ish\b", re.IGNORECASE),
    re.compile(r"\bage\s+(\d+)\b", re.IGNORECASE),
    re.compile(r"\baround\s+(\d+)\b", re.IGNORECASE),
)


def extract_age(text: str) -> Optional[int]:
    """
    Age from an explicit numeric mention.

    Only the first pattern that matches is consulted; an implausible
    value there (>= 120) means no age rather than trying later patterns.
    """
    for pattern in AGE_PATTERNS:
        match = pattern.search(text)
        if match:
            digits = match.group(1)
            if len(digits) > MAX_COUNT_DIGITS:
                return None
            age = int(digits)
            return age if age < MAX_AGE else None
    return None


# ── Job ──────────────────────────────────────────────────────────

_JOB_END = r"(?=\s+at\b|\s+for\b|\s+and\b|[.,!?;]|$)"
_NOT_A_TITLE = rf"(?!(?:at|for|in|on|with|from|friend|{_TIME})\b)"

JOB_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        rf"\bworks?\s+(?:as\s+)?(?:an?\s+)?{_NOT_A_TITLE}([a-z][a-z\s]*?){_JOB_END}",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:job|profession|career|work)\s+(?:is\s+)?(?:as\s+)?(?:an?\s+)?"
        rf"{_NOT_A_TITLE}([a-z][a-z\s]*?){_JOB_END}",
        re.IGNORECASE,
    ),
    # "is a nurse at Mercy" (the employer must be capitalized)
    re.compile(r"\b(?i:is)\s+(?i:an?)\s+([A-Za-z][A-Za-z\s]*?)\s+(?i:at)\s+[A-Z]"),
    re.compile(rf"\bpromoted\s+to\s+([a-z][a-z\s]*?){_JOB_END}", re.IGNORECASE),
)


def extract_job(text: str) -> Optional[str]:
    for pattern in JOB_PATTERNS:
        match = pattern.search(text)
        if match:
            job = match.group(1).strip()
            if job:
                return job
    return None


# ── Contact info ─────────────────────────────────────────────────

_PHONE_BODY = r"([\d\-()\s.]{10,})"

PHONE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\b(?:phone|number|call|text)(?:\s+is|\s*:)?\s*{_PHONE_BODY}", re.IGNORECASE),
    re.compile(_PHONE_BODY),
)
_PHONE_STRIP = re.compile(r"[^\d\-()]")

EMAIL_PATTERN = re.compile(r"([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})")


def normalize_phone(raw: str) -> str:
    """Keep only digits, hyphens and parentheses."""
    return _PHONE_STRIP.sub("", raw)


def extract_phone(text: str) -> Optional[str]:
    for pattern in PHONE_PATTERNS:
        for match in pattern.finditer(text):
            phone = normalize_phone(match.group(1))
            if any(ch.isdigit() for ch in phone):
                return phone
    return None


def extract_email(text: str) -> Optional[str]:
    match = EMAIL_PATTERN.search(text)
    return match.group(1) if match else None


# ── Relationship ─────────────────────────────────────────────────

def extract_relationship(text: str) -> Relationship:
    lowered = text.lower()
    for relationship, words in lexicons.RELATIONSHIP_LEXICON:
        if lexicons.contains_any(lowered, words):
            return relationship
    return Relationship.ACQUAINTANCE


# ── Family ───────────────────────────────────────────────────────

def _split_names(captured: Optional[str]) -> list[str]:
    if not captured:
        return []
    return [n.strip() for n in re.split(r",|\s+and\s+", captured) if n.strip()]


def _count_placeholders(match: re.Match[str]) -> list[str]:
    digits = match.group(1)
    if len(digits) > MAX_COUNT_DIGITS:
        return []
    count = int(digits)
    return [f"child {i + 1}" for i in range(count)]


def _named(match: re.Match[str]) -> list[str]:
    return _split_names(match.group(1))


def _count_only(match: re.Match[str]) -> list[str]:
    # "has 3 siblings" is recognised but deliberately not expanded
    return []


KID_RULES: tuple[tuple[re.Pattern[str], RuleHandler], ...] = (
    (re.compile(r"\b(?:has|have)\s+(\d+)\s+(?:kids?|children)\b", re.IGNORECASE), _count_placeholders),
    (re.compile(rf"\b(?i:kids?|children)(?:\s+(?i:named|called))?\s+({_NAME_LIST})"), _named),
    (re.compile(rf"\b(?i:son|daughter)\s+({_NAME})\b"), _named),
    # Unnamed twins yield nothing
    (
        re.compile(
            rf"\b(?i:twins?)\s+(?i:boys?|girls?)\b(?:\s+(?i:named|called))?(?:\s+({_NAME_LIST}))?"
        ),
        _named,
    ),
)

SIBLING_RULES: tuple[tuple[re.Pattern[str], RuleHandler], ...] = (
    (re.compile(rf"\b(?i:brother|sister)\s+({_NAME})\b"), _named),
    (re.compile(r"\b(?:has|have)\s+(\d+)\s+(?:brothers?|sisters?|siblings?)\b", re.IGNORECASE), _count_only),
    (re.compile(rf"\b(?i:siblings?)\s+(?:(?i:named|called)\s+)?({_NAME_LIST})"), _named),
)


def _accumulate(text: str, rules) -> list[str]:
    found: list[str] = []
    for pattern, handler in rules:
        match = pattern.search(text)
        if match:
            found.extend(handler(match))
    return _unique(found)


def extract_kids(text: str) -> list[str]:
    return _accumulate(text, KID_RULES)


def extract_siblings(text: str) -> list[str]:
    return _accumulate(text, SIBLING_RULES)


# ── Preferences ──────────────────────────────────────────────────

_LIKE_VERB = r"(?:likes?|loves?|enjoys?)"
_DISLIKE_VERB = (
    rf"(?:hates?|dislikes?|can{_APOS}?t\s+stand|doesn{_APOS}?t\s+like"
    r"|not\s+a\s+fan\s+of|not\s+into)"
)
# A preference list runs until punctuation, "but", or the next preference verb
_LIST_END = (
    rf"(?=(?:\s*,\s*|\s+)(?:and\s+|but\s+)?(?:{_LIKE_VERB}|{_DISLIKE_VERB})\b"
    r"|\s+but\b|[.!?;]|$)"
)
_ITEMS = r"([a-z][a-z\s,]*?)"

LIKE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        rf"(?<!not )(?<!n't )(?<!n’t )\b(?:likes?|loves?|enjoys?|into)\s+{_ITEMS}{_LIST_END}",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:favorite|favourite|fav)\s+(?:thing|food|drink|activity|hobby)\s+is\s+([a-z][a-z\s]*)",
        re.IGNORECASE,
    ),
)

DISLIKE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        rf"\b(?:hates?|dislikes?|can{_APOS}?t\s+stand|doesn{_APOS}?t\s+like)\s+{_ITEMS}{_LIST_END}",
        re.IGNORECASE,
    ),
    re.compile(rf"\b(?:not\s+a\s+fan\s+of|not\s+into)\s+{_ITEMS}{_LIST_END}", re.IGNORECASE),
)


def split_items(captured: str) -> list[str]:
    """Split a captured preference list on commas and " and "."""
    return [item.strip() for item in re.split(r",|\s+and\s+", captured) if item.strip()]


def _collect_items(text: str, patterns: tuple[re.Pattern[str], ...]) -> list[str]:
    items: list[str] = []
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            items.extend(split_items(match.group(1)))
    return _unique(items)


def extract_likes(text: str) -> list[str]:
    return _collect_items(text, LIKE_PATTERNS)


def extract_dislikes(text: str) -> list[str]:
    return _collect_items(text, DISLIKE_PATTERNS)


def extract_interests(text: str) -> list[str]:
    """Every interest keyword that appears anywhere in the text."""
    lowered = text.lower()
    return [keyword for keyword in lexicons.INTEREST_KEYWORDS if keyword in lowered]


# ── Derived ──────────────────────────────────────────────────────

def derive_tags(
    text: str,
    kids: list[str],
    likes: list[str],
    job: Optional[str],
) -> list[str]:
    """
    Tags implied by other fields rather than matched directly.

    Tags of 20+ characters or mentioning "met"/"yesterday" are dropped so
    that fragments of the raw sentence never end up as tags.
    """
    lowered = text.lower()
    tags: list[str] = []
    if kids:
        tags.append("parent")
    if likes or lexicons.contains_any(lowered, lexicons.SOCIAL_VENUE_WORDS):
        tags.append("social")
    if job:
        tags.append("professional")

    return [
        tag for tag in _unique(tags)
        if len(tag) < lexicons.TAG_MAX_LENGTH
        and not lexicons.contains_any(tag, lexicons.TAG_BANNED_SUBSTRINGS)
    ]


def analyze_sentiment(text: str) -> Sentiment:
    lowered = text.lower()
    positive = sum(1 for word in lexicons.POSITIVE_WORDS if word in lowered)
    negative = sum(1 for word in lexicons.NEGATIVE_WORDS if word in lowered)

    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))
