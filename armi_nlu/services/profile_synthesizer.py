"""
Profile Synthesizer.

Runs every field extractor once over the same utterance and assembles the
results into a single ``ExtractedProfile``.
"""

from __future__ import annotations

from armi_nlu.clock import Clock, utc_now
from armi_nlu.schemas.profile import ExtractedProfile
from armi_nlu.services import extractors


def synthesize_profile(text: str, now: Clock = utc_now) -> ExtractedProfile:
    """
    Build a fresh contact profile from one utterance.

    Extractors are independent of each other; only the derived tags look
    at other fields, and they are computed last from the finished values.
    """
    kids = extractors.extract_kids(text)
    likes = extractors.extract_likes(text)
    job = extractors.extract_job(text)

    return ExtractedProfile(
        name=extractors.extract_name(text),
        age=extractors.extract_age(text),
        phone=extractors.extract_phone(text),
        email=extractors.extract_email(text),
        job=job,
        relationship=extractors.extract_relationship(text),
        kids=kids,
        siblings=extractors.extract_siblings(text),
        likes=likes,
        dislikes=extractors.extract_dislikes(text),
        interests=extractors.extract_interests(text),
        tags=extractors.derive_tags(text, kids=kids, likes=likes, job=job),
        sentiment=extractors.analyze_sentiment(text),
        notes=text,
        last_contact_date=now(),
        is_new=True,
    )
