"""
LLM Collaborator.

The language-model side of intent understanding. A collaborator returns the
raw JSON object the model produced; validating it against the contract
models and falling back on failure is the interaction service's job.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Protocol

import httpx

from armi_nlu.clock import Clock, utc_now
from armi_nlu.config import Settings, get_settings
from armi_nlu.errors import CollaboratorError
from armi_nlu.logging_config import get_logger
from armi_nlu.schemas.reminder import ReminderContext

logger = get_logger(__name__)


INTERACTION_PROMPT = """You are ARMi, an assistant that manages a user's personal relationships from natural-language commands.

Decide what the user wants and extract every piece of structured data the sentence states or strongly implies. Never invent details.

Return ONLY a JSON object:
{
  "intent": "create_profile" | "update_profile" | "create_reminder" | "schedule_text" | "multi_action" | "clarify",
  "confidence": number between 0 and 1,
  "actions": [
    {"type": "create_profile" | "update_profile", "data": {"name": string, "age": number|null, "phone": string|null, "email": string|null, "job": string|null, "relationship": "family"|"friend"|"partner"|"coworker"|"neighbor"|"acquaintance", "kids": [], "siblings": [], "parents": [], "likes": [], "dislikes": [], "interests": [], "tags": [], "notes": string|null, "birthday": "MM/DD/YYYY"|null, "instagram": string|null, "snapchat": string|null, "twitter": string|null, "tiktok": string|null, "facebook": string|null, "lastContactDate": ISO-8601}},
    {"type": "create_reminder", "data": {"title": string, "description": string|null, "reminderType": "general"|"health"|"celebration"|"career"|"life_event", "scheduledFor": ISO-8601, "profileId": number|null}},
    {"type": "schedule_text", "data": {"phoneNumber": string, "message": string, "scheduledFor": ISO-8601, "profileId": number|null}}
  ],
  "response": string,
  "clarification": string|null
}

Use "multi_action" when the sentence asks for more than one action and "clarify" (with an empty actions list) when the request is too vague to act on. Resolve relative dates ("tomorrow", "next Friday at 3pm") against the current time: {now}."""


REMINDER_RESPONSE_PROMPT = """You are ARMi. The user was offered a reminder and is replying in natural language.

Decide whether they want it created ("yes", "sounds good", "set it for Thursday at 4pm"), cancelled ("no", "not now") or whether you need to ask ("clarify"). Apply any date or time they mention against the current time: {now}.

Return ONLY a JSON object:
{"action": "create" | "cancel" | "clarify", "title": string|null, "description": string|null, "type": "general"|"health"|"celebration"|"career"|"life_event"|null, "scheduledFor": ISO-8601|null, "response": string}"""


class LLMCollaborator(Protocol):
    """Anything that can answer the two questions the fallback engine answers."""

    async def classify(self, input_text: str) -> dict[str, Any]:
        ...

    async def resolve_reminder(
        self, input_text: str, context: ReminderContext
    ) -> dict[str, Any]:
        ...


class OpenAICollaborator:
    """
    Chat-completions client speaking the ARMi contract.

    Uses the JSON response format so the model's reply can be parsed
    directly. HTTP failures propagate as ``httpx`` exceptions; unusable
    content raises ``CollaboratorError``.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 30.0,
        temperature: float = 0.1,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Clock = utc_now,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.temperature = temperature
        self._transport = transport
        self._clock = clock

    async def classify(self, input_text: str) -> dict[str, Any]:
        return await self._complete(
            system_prompt=self._with_now(INTERACTION_PROMPT),
            user_content=input_text,
            max_tokens=2000,
        )

    async def resolve_reminder(
        self, input_text: str, context: ReminderContext
    ) -> dict[str, Any]:
        user_content = (
            f"Context: {json.dumps(context.to_wire())}\n\n"
            f"User response: {input_text}"
        )
        return await self._complete(
            system_prompt=self._with_now(REMINDER_RESPONSE_PROMPT),
            user_content=user_content,
            max_tokens=500,
        )

    def _with_now(self, prompt: str) -> str:
        return prompt.replace("{now}", self._clock().isoformat())

    async def _complete(
        self, system_prompt: str, user_content: str, max_tokens: int
    ) -> dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                f"{self.base_url}/chat/completions",
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json={
                    "model": self.model,
                    "messages": [
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": user_content},
                    ],
                    "response_format": {"type": "json_object"},
                    "temperature": self.temperature,
                    "max_tokens": max_tokens,
                },
            )
            response.raise_for_status()
            data = response.json()

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise CollaboratorError(f"Unexpected completion shape: {e}") from e

        if not content:
            raise CollaboratorError("No response from LLM")

        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as e:
            raise CollaboratorError(f"LLM returned invalid JSON: {e}") from e

        if not isinstance(parsed, dict):
            raise CollaboratorError("LLM returned JSON that is not an object")

        logger.debug("llm_response_parsed", model=self.model, keys=sorted(parsed))
        return parsed


def build_collaborator(
    settings: Settings | None = None, clock: Clock = utc_now
) -> OpenAICollaborator | None:
    """
    Construct the OpenAI collaborator, or None when it should not be used.

    The LLM is skipped when the feature flag is off or the API key is
    missing or does not look like an OpenAI secret key. ``clock`` supplies
    the current time written into the prompts.
    """
    settings = settings or get_settings()
    if not settings.llm_configured:
        logger.info("llm_collaborator_disabled", llm_enabled=settings.feature_llm_enabled)
        return None

    return OpenAICollaborator(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        base_url=settings.openai_base_url,
        timeout=settings.llm_timeout_seconds,
        temperature=settings.llm_temperature,
        clock=clock,
    )
