"""Tests for participant parsing and draft validation."""

from datetime import datetime

import pytest
import pytz

from models import Meeting
from utils import INVALID, ORDER, PAST, REQUIRED, combine, parse_participants, validate_meeting


def make_draft(**overrides):
    values = {
        "topic": "Standup",
        "date": "2030-01-02",
        "start_time": "09:00",
        "end_time": "09:30",
    }
    values.update(overrides)
    return Meeting(**values)


class TestParseParticipants:

    def test_splits_and_trims(self):
        assert parse_participants("Ann, Bob") == ["Ann", "Bob"]

    def test_keeps_empty_segments_and_order(self):
        assert parse_participants("Ann, ,Bob,") == ["Ann", "", "Bob", ""]

    def test_no_deduplication(self):
        assert parse_participants("Ann,Ann") == ["Ann", "Ann"]

    def test_empty_text(self):
        assert parse_participants("") == [""]


class TestCombine:

    def test_naive(self):
        assert combine("2030-01-02", "09:15") == datetime(2030, 1, 2, 9, 15)

    def test_accepts_seconds(self):
        assert combine("2030-01-02", "09:15:30") == datetime(2030, 1, 2, 9, 15, 30)

    def test_localizes_with_timezone(self):
        tz = pytz.timezone("Europe/Istanbul")
        result = combine("2030-01-02", "09:00", tz)
        assert result.tzinfo is not None
        assert result.astimezone(pytz.utc).hour == 6

    def test_accepts_twelve_hour_clock(self):
        assert combine("2030-01-02", "9:30 PM") == datetime(2030, 1, 2, 21, 30)

    @pytest.mark.parametrize("date_str,time_str", [
        ("2030-01-09", "9"),
        ("2030-01-02", "9"),
        ("02/01/2030", "09:00"),
        ("2030-13-01", "09:00"),
        ("2030-01-02", "25:00"),
        ("2030-01-02", "soon"),
    ])
    def test_rejects_bad_values(self, date_str, time_str):
        with pytest.raises(ValueError):
            combine(date_str, time_str)


class TestValidateMeeting:

    @pytest.mark.parametrize("field", ["topic", "date", "start_time", "end_time"])
    def test_missing_required_field(self, field, fixed_now):
        assert validate_meeting(make_draft(**{field: ""}), fixed_now) == REQUIRED

    def test_participants_optional(self, fixed_now):
        assert validate_meeting(make_draft(participants=[]), fixed_now) is None

    def test_unparseable_time(self, fixed_now):
        assert validate_meeting(make_draft(start_time="later"), fixed_now) == INVALID

    def test_bare_number_time_matching_day(self, fixed_now):
        draft = make_draft(date="2030-01-09", start_time="9", end_time="10:00")
        assert validate_meeting(draft, fixed_now) == INVALID

    def test_start_in_past(self, fixed_now):
        draft = make_draft(date="2030-01-01", start_time="11:59", end_time="13:00")
        assert validate_meeting(draft, fixed_now) == PAST

    def test_start_equal_to_now_is_not_future(self, fixed_now):
        draft = make_draft(date="2030-01-01", start_time="12:00", end_time="13:00")
        assert validate_meeting(draft, fixed_now) == PAST

    def test_past_checked_before_order(self, fixed_now):
        draft = make_draft(date="2029-12-31", start_time="10:00", end_time="09:00")
        assert validate_meeting(draft, fixed_now) == PAST

    def test_end_equal_to_start(self, fixed_now):
        assert validate_meeting(make_draft(end_time="09:00"), fixed_now) == ORDER

    def test_end_before_start(self, fixed_now):
        assert validate_meeting(make_draft(end_time="08:00"), fixed_now) == ORDER

    def test_valid(self, fixed_now):
        assert validate_meeting(make_draft(), fixed_now) is None

    def test_timezone_aware_now(self):
        tz = pytz.timezone("America/New_York")
        now = tz.localize(datetime(2030, 1, 2, 8, 0))
        assert validate_meeting(make_draft(), now, tz) is None
        later = tz.localize(datetime(2030, 1, 2, 9, 5))
        assert validate_meeting(make_draft(), later, tz) == PAST
