"""
Shared fixtures for the meeting organizer tests.

HTTP calls are mocked with respx; no test talks to a real server.
"""

from datetime import date, datetime, timedelta

import pytest

from controller import MeetingController
from meeting_service import MeetingService
from models import Meeting

BASE_URL = "http://api.test"
MEETINGS_URL = f"{BASE_URL}/api/v1/meetings"


@pytest.fixture
def tomorrow():
    return (date.today() + timedelta(days=1)).isoformat()


@pytest.fixture
def fixed_now():
    """A fixed clock: 2030-01-01 12:00 local time."""
    return datetime(2030, 1, 1, 12, 0)


@pytest.fixture
def service():
    return MeetingService(BASE_URL, timeout=5.0)


@pytest.fixture
def controller(service):
    return MeetingController(service, locale="en")


@pytest.fixture
def mock_meeting():
    """Sample meeting record as returned by the API."""
    return {
        "id": 1,
        "topic": "Sprint Planning",
        "date": "2030-01-02",
        "start_time": "10:00",
        "end_time": "11:00",
        "participants": ["Ann", "Bob"],
    }


@pytest.fixture
def meeting(mock_meeting):
    return Meeting.from_dict(mock_meeting)
