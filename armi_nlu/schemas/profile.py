"""
Data models for contact profiles extracted from a single utterance.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from armi_nlu.schemas.base import ContractModel

UNKNOWN_PERSON = "Unknown Person"
MAX_AGE = 120


class Relationship(str, Enum):
    FAMILY = "family"
    FRIEND = "friend"
    PARTNER = "partner"
    COWORKER = "coworker"
    NEIGHBOR = "neighbor"
    ACQUAINTANCE = "acquaintance"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class ExtractedProfile(ContractModel):
    """Candidate contact data derived from one utterance."""
    name: str
    age: Optional[int] = Field(default=None, ge=0, lt=MAX_AGE)
    phone: Optional[str] = None
    email: Optional[str] = None
    job: Optional[str] = None
    relationship: Relationship = Relationship.ACQUAINTANCE
    kids: list[str] = Field(default_factory=list)
    siblings: list[str] = Field(default_factory=list)
    parents: list[str] = Field(default_factory=list)
    likes: list[str] = Field(default_factory=list)
    dislikes: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    notes: Optional[str] = None
    last_contact_date: Optional[datetime] = None
    is_new: bool = True

    # Only the LLM collaborator fills these in
    birthday: Optional[str] = None  # MM/DD/YYYY
    instagram: Optional[str] = None
    snapchat: Optional[str] = None
    twitter: Optional[str] = None
    tiktok: Optional[str] = None
    facebook: Optional[str] = None

    # Only the rule-based engine fills this in
    sentiment: Optional[Sentiment] = None

    @field_validator(
        "kids", "siblings", "parents", "likes", "dislikes", "interests", "tags",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value):
        return [] if value is None else value
