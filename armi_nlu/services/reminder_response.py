"""
Reminder-Response Parser.

Interprets the user's free-text reply to a reminder the app suggested.
The rule-based path only knows two outcomes, create or cancel; asking for
clarification is left to the LLM collaborator.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from armi_nlu.clock import Clock, utc_now
from armi_nlu.logging_config import get_logger
from armi_nlu.schemas.reminder import (
    ReminderContext,
    ReminderResolution,
    ReminderType,
    ResolutionAction,
)
from armi_nlu.services import lexicons

logger = get_logger(__name__)

DEFAULT_TITLE = "Follow up"
DEFAULT_DESCRIPTION = "Check in"
DEFAULT_DELAY = timedelta(days=1)

CANCEL_RESPONSE = "No problem! I won't create a reminder for this contact."
CREATE_RESPONSE = "I'll create that reminder for you!"


def is_cancellation(input_text: str) -> bool:
    """True when the reply contains "no", "cancel" or "don't" anywhere."""
    return lexicons.contains_any(input_text.lower(), lexicons.CANCEL_TRIGGERS)


def _reminder_type(raw: Optional[str]) -> ReminderType:
    try:
        return ReminderType(raw) if raw else ReminderType.GENERAL
    except ValueError:
        logger.warning("unknown_reminder_type", reminder_type=raw)
        return ReminderType.GENERAL


def resolve_reminder_response(
    input_text: str,
    context: Optional[ReminderContext] = None,
    now: Clock = utc_now,
) -> ReminderResolution:
    """
    Decide whether to create or drop the suggested reminder.

    A confirmed reminder keeps the suggestion's title, description and type
    (falling back to generic defaults) and is scheduled for tomorrow.
    """
    if is_cancellation(input_text):
        logger.info("reminder_response_resolved", action=ResolutionAction.CANCEL.value)
        return ReminderResolution(action=ResolutionAction.CANCEL, response=CANCEL_RESPONSE)

    suggestion = context.suggested_reminder if context else None

    resolution = ReminderResolution(
        action=ResolutionAction.CREATE,
        title=(suggestion and suggestion.title) or DEFAULT_TITLE,
        description=(suggestion and suggestion.description) or DEFAULT_DESCRIPTION,
        reminder_type=_reminder_type(suggestion.reminder_type if suggestion else None),
        scheduled_for=now() + DEFAULT_DELAY,
        response=CREATE_RESPONSE,
    )
    logger.info(
        "reminder_response_resolved",
        action=resolution.action.value,
        reminder_type=resolution.reminder_type.value,
    )
    return resolution
