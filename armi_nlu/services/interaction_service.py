"""
Interaction Service.

Front door for the app: asks the LLM collaborator first and falls back to
the rule-based engine whenever the collaborator is absent, fails, or
returns something that does not validate against the contract models.
"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from armi_nlu.clock import Clock, utc_now
from armi_nlu.config import Settings
from armi_nlu.logging_config import get_logger, start_trace
from armi_nlu.schemas.intent import IntentResult
from armi_nlu.schemas.reminder import ReminderContext, ReminderResolution
from armi_nlu.services.intent_classifier import classify_intent
from armi_nlu.services.llm_client import LLMCollaborator, build_collaborator
from armi_nlu.services.reminder_response import resolve_reminder_response

logger = get_logger(__name__)


class InteractionService:
    """
    Understands user commands and replies to reminder suggestions.

    The collaborator is passed in explicitly; ``None`` means "rule-based
    only". ``from_settings()`` builds one from settings that shares the
    service's clock.
    """

    def __init__(
        self,
        collaborator: Optional[LLMCollaborator] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.collaborator = collaborator
        self.clock = clock

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, clock: Clock = utc_now
    ) -> InteractionService:
        return cls(collaborator=build_collaborator(settings, clock=clock), clock=clock)

    async def process_interaction(self, input_text: str) -> IntentResult:
        """Classify a command, preferring the LLM and falling back to rules."""
        start_trace()

        if self.collaborator is None:
            logger.info("interaction_fallback", reason="llm_not_configured")
            return classify_intent(input_text, now=self.clock)

        try:
            raw = await self.collaborator.classify(input_text)
            result = IntentResult.model_validate(raw)
        except ValidationError as e:
            logger.warning("interaction_llm_invalid", error_count=e.error_count())
            return classify_intent(input_text, now=self.clock)
        except Exception as e:
            logger.error("interaction_llm_error", error=str(e))
            return classify_intent(input_text, now=self.clock)

        logger.info(
            "interaction_llm_complete",
            intent=result.intent.value,
            confidence=result.confidence,
            actions=len(result.actions),
        )
        return result

    async def process_reminder_response(
        self,
        input_text: str,
        context: Optional[ReminderContext] = None,
    ) -> ReminderResolution:
        """Resolve a reply to a suggested reminder, preferring the LLM."""
        start_trace()
        context = context or ReminderContext()

        if self.collaborator is None:
            logger.info("reminder_response_fallback", reason="llm_not_configured")
            return resolve_reminder_response(input_text, context, now=self.clock)

        try:
            raw = await self.collaborator.resolve_reminder(input_text, context)
            resolution = ReminderResolution.model_validate(raw)
        except ValidationError as e:
            logger.warning("reminder_response_llm_invalid", error_count=e.error_count())
            return resolve_reminder_response(input_text, context, now=self.clock)
        except Exception as e:
            logger.error("reminder_response_llm_error", error=str(e))
            return resolve_reminder_response(input_text, context, now=self.clock)

        logger.info("reminder_response_llm_complete", action=resolution.action.value)
        return resolution
