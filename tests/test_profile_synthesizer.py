from armi_nlu.schemas.profile import ExtractedProfile, Relationship
from armi_nlu.services.profile_synthesizer import synthesize_profile


class TestSynthesizeProfile:
    def test_met_at_gym(self, clock, frozen_now):
        profile = synthesize_profile("I met Sarah at the gym yesterday", now=clock)

        assert isinstance(profile, ExtractedProfile)
        assert profile.name == "Sarah"
        assert profile.relationship == Relationship.ACQUAINTANCE
        assert profile.notes == "I met Sarah at the gym yesterday"
        assert profile.last_contact_date == frozen_now
        assert profile.is_new is True

    def test_coworker(self, clock):
        profile = synthesize_profile("Add my coworker Mike to my contacts", now=clock)
        assert profile.name == "Mike"
        assert profile.relationship == Relationship.COWORKER

    def test_age(self, clock):
        assert synthesize_profile("she's about 25", now=clock).age == 25
        assert synthesize_profile("she's about 130", now=clock).age is None

    def test_preferences_and_tags(self, clock):
        profile = synthesize_profile("loves hiking and can't stand spicy food", now=clock)
        assert "hiking" in profile.likes
        assert "spicy food" in profile.dislikes
        assert "hiking" in profile.interests
        assert "social" in profile.tags

    def test_rich_sentence(self, clock):
        profile = synthesize_profile(
            "My friend Jess is a nurse at Mercy, she's about 34, has 2 kids and "
            "loves yoga. Her number is 555-123-4567.",
            now=clock,
        )
        assert profile.name == "Jess"
        assert profile.age == 34
        assert profile.job == "nurse"
        assert profile.phone == "555-123-4567"
        assert profile.relationship == Relationship.FRIEND
        assert profile.kids == ["child 1", "child 2"]
        assert profile.likes == ["yoga"]
        assert "yoga" in profile.interests
        assert profile.tags == ["parent", "social", "professional"]

    def test_empty_input_is_fully_populated(self, clock):
        profile = synthesize_profile("", now=clock)
        assert profile.name == "Unknown Person"
        assert profile.age is None
        for field in ("kids", "siblings", "parents", "likes", "dislikes", "interests", "tags"):
            assert getattr(profile, field) == []

    def test_wire_format(self, clock):
        wire = synthesize_profile("I met Sarah at the gym yesterday", now=clock).to_wire()
        assert wire["lastContactDate"] == "2026-10-16T12:00:00Z"
        assert wire["isNew"] is True
        assert wire["relationship"] == "acquaintance"

    def test_same_input_same_output(self, clock):
        text = "My sister Amy loves music and hates traffic"
        assert synthesize_profile(text, now=clock) == synthesize_profile(text, now=clock)
