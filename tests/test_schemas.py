import pytest
from pydantic import ValidationError

from armi_nlu.schemas.intent import Intent, IntentResult, ProfileAction, ReminderAction, TextAction
from armi_nlu.schemas.profile import ExtractedProfile
from armi_nlu.schemas.reminder import ReminderResolution, ReminderType, ResolutionAction


class TestExtractedProfile:
    def test_defaults(self):
        profile = ExtractedProfile(name="Sarah")
        assert profile.relationship.value == "acquaintance"
        assert profile.is_new is True
        assert profile.kids == []

    def test_null_lists_become_empty(self):
        profile = ExtractedProfile.model_validate({"name": "Sarah", "kids": None, "tags": None})
        assert profile.kids == []
        assert profile.tags == []

    def test_age_must_be_plausible(self):
        with pytest.raises(ValidationError):
            ExtractedProfile(name="Sarah", age=130)

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            ExtractedProfile.model_validate({"age": 30})

    def test_unknown_relationship_is_rejected(self):
        with pytest.raises(ValidationError):
            ExtractedProfile.model_validate({"name": "Sarah", "relationship": "nemesis"})

    def test_accepts_camel_and_snake_case(self):
        camel = ExtractedProfile.model_validate(
            {"name": "Sarah", "lastContactDate": "2026-10-16T12:00:00Z", "isNew": False}
        )
        snake = ExtractedProfile(name="Sarah", last_contact_date="2026-10-16T12:00:00Z", is_new=False)
        assert camel == snake


class TestIntentResult:
    def test_actions_are_discriminated_by_type(self):
        result = IntentResult.model_validate(
            {
                "intent": "multi_action",
                "confidence": 0.9,
                "actions": [
                    {"type": "update_profile", "data": {"name": "Mike", "job": "manager"}},
                    {
                        "type": "create_reminder",
                        "data": {"title": "Call Mike", "reminderType": "career", "scheduledFor": "2026-10-17T09:00:00Z"},
                    },
                    {
                        "type": "schedule_text",
                        "data": {"phoneNumber": "555-0100", "message": "Congrats!", "scheduledFor": "2026-10-17T09:00:00Z"},
                    },
                ],
                "response": "Done.",
            }
        )

        assert result.intent == Intent.MULTI_ACTION
        assert [type(a) for a in result.actions] == [ProfileAction, ReminderAction, TextAction]
        assert result.actions[1].data.reminder_type == ReminderType.CAREER
        assert result.clarification is None

    def test_unknown_action_type_is_rejected(self):
        with pytest.raises(ValidationError):
            IntentResult.model_validate(
                {"intent": "create_profile", "confidence": 0.5, "actions": [{"type": "dance", "data": {}}], "response": ""}
            )

    def test_confidence_bounds(self):
        with pytest.raises(ValidationError):
            IntentResult(intent=Intent.CLARIFY, confidence=1.5, response="?")

    def test_reminder_requires_schedule(self):
        with pytest.raises(ValidationError):
            IntentResult.model_validate(
                {
                    "intent": "create_reminder",
                    "confidence": 0.8,
                    "actions": [{"type": "create_reminder", "data": {"title": "Call"}}],
                    "response": "",
                }
            )


class TestReminderResolution:
    def test_type_alias(self):
        resolution = ReminderResolution.model_validate(
            {"action": "create", "title": "Call", "type": "celebration", "scheduledFor": None, "response": "ok"}
        )
        assert resolution.action == ResolutionAction.CREATE
        assert resolution.reminder_type == ReminderType.CELEBRATION
        assert resolution.to_wire()["type"] == "celebration"

    def test_clarify_needs_no_fields(self):
        resolution = ReminderResolution.model_validate({"action": "clarify", "response": "Which day?"})
        assert resolution.action == ResolutionAction.CLARIFY
        assert resolution.scheduled_for is None
