"""
Rule-based Intent Classifier.

Decides what the user wants from keyword triggers, checked in a fixed
priority order (reminder, then text, then profile). This is not a scored
classifier: the first trigger found decides, and confidence is constant.

Only ``create_reminder``, ``schedule_text`` and ``create_profile`` can come
out of here. ``clarify`` and ``multi_action`` are produced solely by the LLM
collaborator. The reminder and text branches also emit fixed default
payloads instead of mining the sentence for a title, time or recipient.
"""

from __future__ import annotations

from datetime import timedelta

from armi_nlu.clock import Clock, utc_now
from armi_nlu.logging_config import get_logger
from armi_nlu.schemas.intent import (
    Intent,
    IntentResult,
    ProfileAction,
    ReminderAction,
    TextAction,
)
from armi_nlu.schemas.reminder import ReminderData, ReminderType, TextData
from armi_nlu.services import lexicons
from armi_nlu.services.profile_synthesizer import synthesize_profile

logger = get_logger(__name__)

FALLBACK_CONFIDENCE = 0.85
FALLBACK_RESPONSE = (
    "I've processed your request with the offline assistant. "
    "Connect an AI provider for richer understanding."
)

# Default payloads for the keyword-only branches
DEFAULT_REMINDER_TITLE = "Follow up reminder"
DEFAULT_REMINDER_DESCRIPTION = "Check in with contact"
DEFAULT_REMINDER_DELAY = timedelta(days=7)

DEFAULT_TEXT_PHONE = "555-0123"
DEFAULT_TEXT_MESSAGE = "Hey! How are you?"
DEFAULT_TEXT_DELAY = timedelta(days=1)


def classify_intent(input_text: str, now: Clock = utc_now) -> IntentResult:
    """
    Classify an utterance and build exactly one action for it.

    Args:
        input_text: The raw sentence the user typed or spoke.
        now: Clock used for ``scheduledFor`` and ``lastContactDate``.

    Returns:
        IntentResult with a single action and confidence 0.85.
    """
    lowered = input_text.lower()

    if lexicons.contains_any(lowered, lexicons.REMINDER_TRIGGERS):
        intent = Intent.CREATE_REMINDER
        action = ReminderAction(
            data=ReminderData(
                title=DEFAULT_REMINDER_TITLE,
                description=DEFAULT_REMINDER_DESCRIPTION,
                reminder_type=ReminderType.GENERAL,
                scheduled_for=now() + DEFAULT_REMINDER_DELAY,
                profile_id=None,
            )
        )
    elif lexicons.contains_any(lowered, lexicons.TEXT_TRIGGERS):
        intent = Intent.SCHEDULE_TEXT
        action = TextAction(
            data=TextData(
                phone_number=DEFAULT_TEXT_PHONE,
                message=DEFAULT_TEXT_MESSAGE,
                scheduled_for=now() + DEFAULT_TEXT_DELAY,
                profile_id=None,
            )
        )
    else:
        intent = Intent.CREATE_PROFILE
        action = ProfileAction(
            type="create_profile",
            data=synthesize_profile(input_text, now=now),
        )

    logger.info(
        "intent_classified",
        intent=intent.value,
        confidence=FALLBACK_CONFIDENCE,
        input_length=len(input_text),
    )

    return IntentResult(
        intent=intent,
        confidence=FALLBACK_CONFIDENCE,
        actions=[action],
        response=FALLBACK_RESPONSE,
        clarification=None,
    )
