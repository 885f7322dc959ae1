"""
Data models for reminders, scheduled texts and reminder-reply resolution.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from armi_nlu.schemas.base import ContractModel


class ReminderType(str, Enum):
    GENERAL = "general"
    HEALTH = "health"
    CELEBRATION = "celebration"
    CAREER = "career"
    LIFE_EVENT = "life_event"


class ReminderData(ContractModel):
    """Payload of a create_reminder action."""
    title: str
    description: Optional[str] = None
    reminder_type: ReminderType = ReminderType.GENERAL
    scheduled_for: datetime
    profile_id: Optional[int] = None


class TextData(ContractModel):
    """Payload of a schedule_text action."""
    phone_number: str
    message: str
    scheduled_for: datetime
    profile_id: Optional[int] = None


class SuggestedReminder(ContractModel):
    """A reminder the app proposed to the user earlier in the conversation."""
    title: Optional[str] = None
    description: Optional[str] = None
    reminder_type: Optional[str] = Field(default=None, alias="type")


class ReminderContext(ContractModel):
    suggested_reminder: Optional[SuggestedReminder] = None


class ResolutionAction(str, Enum):
    CREATE = "create"
    CANCEL = "cancel"
    CLARIFY = "clarify"


class ReminderResolution(ContractModel):
    """How the user's free-text reply to a suggested reminder should be handled."""
    action: ResolutionAction
    title: Optional[str] = None
    description: Optional[str] = None
    reminder_type: Optional[ReminderType] = Field(default=None, alias="type")
    scheduled_for: Optional[datetime] = None
    response: str
