from datetime import timedelta

import pytest

from armi_nlu.schemas.reminder import (
    ReminderContext,
    ReminderType,
    ResolutionAction,
    SuggestedReminder,
)
from armi_nlu.services.reminder_response import resolve_reminder_response


@pytest.fixture
def context():
    return ReminderContext(
        suggested_reminder=SuggestedReminder(
            title="Call Sarah",
            description="Ask about the new job",
            reminder_type="career",
        )
    )


class TestCancel:
    @pytest.mark.parametrize("reply", ["no thanks", "Please CANCEL that", "don't bother", "nah, not now"])
    def test_cancel_replies(self, reply, context, clock):
        resolution = resolve_reminder_response(reply, context, now=clock)

        assert resolution.action == ResolutionAction.CANCEL
        assert resolution.title is None
        assert resolution.description is None
        assert resolution.reminder_type is None
        assert resolution.scheduled_for is None
        assert resolution.response

    def test_substring_match(self, context, clock):
        # "know" contains "no"
        assert resolve_reminder_response("I know, fine", context, now=clock).action == ResolutionAction.CANCEL


class TestCreate:
    def test_uses_suggestion(self, context, clock, frozen_now):
        resolution = resolve_reminder_response("sounds good", context, now=clock)

        assert resolution.action == ResolutionAction.CREATE
        assert resolution.title == "Call Sarah"
        assert resolution.description == "Ask about the new job"
        assert resolution.reminder_type == ReminderType.CAREER
        assert resolution.scheduled_for == frozen_now + timedelta(days=1)

    def test_defaults_without_suggestion(self, clock):
        resolution = resolve_reminder_response("yes please", ReminderContext(), now=clock)

        assert resolution.action == ResolutionAction.CREATE
        assert resolution.title == "Follow up"
        assert resolution.description == "Check in"
        assert resolution.reminder_type == ReminderType.GENERAL

    def test_missing_context(self, clock):
        assert resolve_reminder_response("sure", None, now=clock).title == "Follow up"

    def test_partial_suggestion(self, clock):
        context = ReminderContext(suggested_reminder=SuggestedReminder(title="Birthday", reminder_type=""))
        resolution = resolve_reminder_response("yes", context, now=clock)

        assert resolution.title == "Birthday"
        assert resolution.description == "Check in"
        assert resolution.reminder_type == ReminderType.GENERAL

    def test_unknown_type_becomes_general(self, clock):
        context = ReminderContext(suggested_reminder=SuggestedReminder(reminder_type="party"))
        assert resolve_reminder_response("ok", context, now=clock).reminder_type == ReminderType.GENERAL

    def test_context_from_wire(self, clock):
        context = ReminderContext.model_validate(
            {"suggestedReminder": {"title": "Check on Mom", "description": "After surgery", "type": "health"}}
        )
        resolution = resolve_reminder_response("yes that works", context, now=clock)

        assert resolution.reminder_type == ReminderType.HEALTH
        assert resolution.to_wire()["type"] == "health"
        assert resolution.to_wire()["scheduledFor"] == "2026-10-17T12:00:00Z"
