"""
Static keyword tables for the rule-based NLU engine.

Everything here is built once at import and never mutated. Membership
tests against these tables are plain substring checks on lowercased
input, so multi-word entries ("lives next door") work the same way as
single words.
"""

from __future__ import annotations

from armi_nlu.schemas.profile import Relationship

# ── Intent triggers ──────────────────────────────────────────────
REMINDER_TRIGGERS: tuple[str, ...] = ("remind", "reminder")
TEXT_TRIGGERS: tuple[str, ...] = ("text", "message", "send")
CANCEL_TRIGGERS: tuple[str, ...] = ("no", "cancel", "don't", "don’t")

# ── Relationships ────────────────────────────────────────────────
FAMILY_WORDS: frozenset[str] = frozenset({
    "cousin", "family", "brother", "sister", "mom", "dad", "mother", "father",
    "aunt", "uncle", "grandmother", "grandfather", "grandma", "grandpa",
    "nephew", "niece",
})
PARTNER_WORDS: frozenset[str] = frozenset({
    "boyfriend", "girlfriend", "husband", "wife", "partner", "spouse",
    "significant other", "fiancé", "fiancée",
})
COWORKER_WORDS: frozenset[str] = frozenset({
    "coworker", "colleague", "boss", "manager", "teammate", "work friend",
    "supervisor",
})
NEIGHBOR_WORDS: frozenset[str] = frozenset({
    "neighbor", "lives next door", "down the street", "in the building",
})
FRIEND_WORDS: frozenset[str] = frozenset({
    "friend", "buddy", "pal", "bestie", "close friend", "old friend",
})

# Checked in this order; the first category with a hit wins
RELATIONSHIP_LEXICON: tuple[tuple[Relationship, frozenset[str]], ...] = (
    (Relationship.FAMILY, FAMILY_WORDS),
    (Relationship.PARTNER, PARTNER_WORDS),
    (Relationship.COWORKER, COWORKER_WORDS),
    (Relationship.NEIGHBOR, NEIGHBOR_WORDS),
    (Relationship.FRIEND, FRIEND_WORDS),
)

# ── Name exclusions ──────────────────────────────────────────────
TIME_WORDS: frozenset[str] = frozenset({
    "yesterday", "today", "tomorrow", "morning", "afternoon", "evening",
    "night", "last", "this", "next", "week", "month", "year",
})
LOCATION_WORDS: frozenset[str] = frozenset({
    "street", "avenue", "road", "drive", "way", "place", "city", "state",
    "country", "home", "house", "office", "work", "school",
})
ORG_WORDS: frozenset[str] = frozenset({
    "university", "college", "company", "corporation", "inc", "llc", "corp", "ltd",
})
COMMON_NOUNS: frozenset[str] = frozenset({
    "phone", "email", "number", "address", "birthday", "party", "meeting",
    "lunch", "dinner", "coffee", "bar", "restaurant",
})
# Sentence-initial command verbs that look like capitalized names
COMMAND_WORDS: frozenset[str] = frozenset({
    "add", "new", "update", "save", "person", "contact", "contacts",
})

FUNCTION_WORDS: frozenset[str] = frozenset({
    "the", "he", "she", "her", "hers", "him", "his", "it", "its", "we", "us",
    "they", "them", "their", "you", "your", "our", "my", "and", "but",
})

NAME_EXCLUSIONS: frozenset[str] = (
    TIME_WORDS | LOCATION_WORDS | ORG_WORDS | COMMON_NOUNS | COMMAND_WORDS | FUNCTION_WORDS
)

# ── Interests ────────────────────────────────────────────────────
INTEREST_KEYWORDS: tuple[str, ...] = (
    "gardening", "design", "music", "sports", "reading", "cooking", "travel",
    "photography", "hiking", "yoga", "gaming", "art", "dancing", "swimming",
    "running", "cycling", "movies", "theater", "concerts", "festivals",
    "volunteering", "crafts",
)

# ── Tags ─────────────────────────────────────────────────────────
SOCIAL_VENUE_WORDS: tuple[str, ...] = ("bar", "drinks")
TAG_MAX_LENGTH = 20
TAG_BANNED_SUBSTRINGS: tuple[str, ...] = ("met", "yesterday")

# ── Sentiment ────────────────────────────────────────────────────
POSITIVE_WORDS: frozenset[str] = frozenset({
    "happy", "excited", "great", "wonderful", "amazing", "good", "love",
    "enjoy", "fantastic", "awesome",
})
NEGATIVE_WORDS: frozenset[str] = frozenset({
    "sad", "upset", "difficult", "hard", "worried", "stressed", "surgery",
    "problem", "trouble", "sick",
})


def contains_any(lowered_text: str, words) -> bool:
    """True if any entry of ``words`` occurs as a substring of ``lowered_text``."""
    return any(word in lowered_text for word in words)
