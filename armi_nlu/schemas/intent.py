"""
Top-level result of intent classification.

Both the rule-based engine and the LLM collaborator must produce an
``IntentResult``; collaborator output that does not validate against
these models is treated as if the collaborator were unavailable.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from armi_nlu.schemas.base import ContractModel
from armi_nlu.schemas.profile import ExtractedProfile
from armi_nlu.schemas.reminder import ReminderData, TextData


class Intent(str, Enum):
    CREATE_PROFILE = "create_profile"
    UPDATE_PROFILE = "update_profile"
    CREATE_REMINDER = "create_reminder"
    SCHEDULE_TEXT = "schedule_text"
    MULTI_ACTION = "multi_action"
    CLARIFY = "clarify"


class ProfileAction(ContractModel):
    type: Literal["create_profile", "update_profile"]
    data: ExtractedProfile


class ReminderAction(ContractModel):
    type: Literal["create_reminder"] = "create_reminder"
    data: ReminderData


class TextAction(ContractModel):
    type: Literal["schedule_text"] = "schedule_text"
    data: TextData


Action = Annotated[
    Union[ProfileAction, ReminderAction, TextAction],
    Field(discriminator="type"),
]


class IntentResult(ContractModel):
    intent: Intent
    confidence: float = Field(ge=0.0, le=1.0)
    actions: list[Action] = Field(default_factory=list)
    response: str
    clarification: Optional[str] = None  # Only meaningful when intent is clarify
