from datetime import datetime
from dateutil.parser import parse as parse_dt
from models import REQUIRED_FIELDS

DATE_FORMAT = '%Y-%m-%d'
TIME_FORMATS = ('%H:%M', '%H:%M:%S')

# Violation keys, mapped to 'error_<key>' in the locale tables
REQUIRED = 'required'
INVALID = 'invalid'
PAST = 'past'
ORDER = 'order'

# ===== Form Input Utilities =====

def parse_participants(text):
    """Split comma-separated participant text into trimmed names."""
    # Empty segments and duplicates are kept, order preserved
    return [p.strip() for p in text.split(',')]

# ===== Time Utilities =====

def now_in(tz=None):
    """Current wall-clock time, timezone-aware when a pytz zone is given."""
    if tz is None:
        return datetime.now()
    return datetime.now(tz)

def _parse_time(time_str, day):
    for fmt in TIME_FORMATS:
        try:
            t = datetime.strptime(time_str, fmt).time()
        except ValueError:
            continue
        return datetime.combine(day.date(), t)
    # dateutil reads a bare number as a day of the month
    if ':' not in time_str:
        raise ValueError(f"Invalid time: {time_str}")
    try:
        return parse_dt(time_str, default=day)
    except OverflowError as e:
        raise ValueError(f"Invalid time: {time_str}") from e

def combine(date_str, time_str, tz=None):
    """Combine a YYYY-MM-DD date and an HH:MM time into a datetime.

    Raises ValueError when either part cannot be parsed.
    """
    day = datetime.strptime(date_str.strip(), DATE_FORMAT)
    dt = _parse_time(time_str.strip(), day)
    if dt.date() != day.date():
        raise ValueError(f"Time {time_str!r} changes the date")
    if dt.tzinfo is not None:
        dt = dt.replace(tzinfo=None)
    if tz is not None:
        dt = tz.localize(dt)
    return dt

# ===== Validation =====

def validate_meeting(meeting, now, tz=None):
    """Check a draft meeting. Returns a violation key, or None when valid."""
    if any(not getattr(meeting, name) for name in REQUIRED_FIELDS):
        return REQUIRED
    try:
        start = combine(meeting.date, meeting.start_time, tz)
        end = combine(meeting.date, meeting.end_time, tz)
    except ValueError:
        return INVALID
    if start <= now:
        return PAST
    if end <= start:
        return ORDER
    return None
