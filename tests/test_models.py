"""Tests for the Meeting record."""

from models import Meeting, empty_draft


def test_from_dict_ignores_unknown_keys(mock_meeting):
    meeting = Meeting.from_dict({**mock_meeting, "room": "B12"})
    assert meeting.id == 1
    assert meeting.topic == "Sprint Planning"
    assert meeting.participants == ["Ann", "Bob"]


def test_from_dict_null_participants():
    meeting = Meeting.from_dict({"id": 3, "topic": "x", "participants": None})
    assert meeting.participants == []
    assert meeting.date == ""


def test_payload_without_id_on_create():
    payload = Meeting(topic="Standup", participants=["Ann"]).to_payload()
    assert "id" not in payload
    assert payload["participants"] == ["Ann"]


def test_payload_with_id(meeting):
    assert meeting.to_payload()["id"] == 1


def test_participants_text(meeting):
    assert meeting.participants_text() == "Ann, Bob"


def test_copy_is_independent(meeting):
    clone = meeting.copy()
    clone.participants.append("Cem")
    assert meeting.participants == ["Ann", "Bob"]


def test_empty_draft():
    draft = empty_draft()
    assert draft.id is None
    assert draft.topic == ""
    assert draft.participants == []
