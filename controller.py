"""
State and actions behind the meeting form and table.

The controller owns the loaded collection, the draft bound to the form and
the editing marker. Network actions are coroutines; callers drive them with
asyncio.run (Streamlit rerun or CLI command).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from locales import get_messages
from meeting_service import MeetingApiError
from models import FORM_FIELDS, Meeting, empty_draft
from utils import now_in, parse_participants, validate_meeting

logger = logging.getLogger(__name__)

SUCCESS = 'success'
ERROR = 'error'

@dataclass
class Notice:
    level: str  # 'success' or 'error'
    message: str

class MeetingController:
    def __init__(self, service, locale='en', tz=None):
        self.service = service
        self.tz = tz
        self.messages = get_messages(locale)
        self.meetings: List[Meeting] = []
        self.draft = empty_draft()
        self.editing_id: Optional[int] = None
        self.error: Optional[str] = None
        self.notices: List[Notice] = []

    # ===== Mode =====

    @property
    def is_editing(self):
        return self.editing_id is not None

    @property
    def submit_label(self):
        return self.messages['button_update' if self.is_editing else 'button_create']

    @property
    def form_title(self):
        return self.messages['form_title_edit' if self.is_editing else 'form_title_create']

    def set_locale(self, locale):
        self.messages = get_messages(locale)

    # ===== Notices =====

    def _notify(self, level, key):
        message = self.messages[key]
        self.notices.append(Notice(level, message))
        if level == ERROR:
            self.error = message
        return message

    def drain_notices(self):
        """Return pending notices and clear them, so each is shown once."""
        notices, self.notices = self.notices, []
        return notices

    # ===== Collection =====

    async def load(self):
        """Replace the collection with the server's. Keeps it on failure."""
        try:
            self.meetings = await self.service.list_meetings()
        except MeetingApiError as e:
            logger.warning("Loading meetings failed: %s", e)
            self._notify(ERROR, 'error_fetch')
            return False
        logger.info("Loaded %d meetings", len(self.meetings))
        return True

    def find(self, meeting_id):
        for meeting in self.meetings:
            if meeting.id == meeting_id:
                return meeting
        return None

    # ===== Draft =====

    def update_field(self, name, value):
        if name not in FORM_FIELDS:
            raise KeyError(name)
        if name == 'participants':
            value = parse_participants(value)
        setattr(self.draft, name, value)

    def validate(self, now=None):
        """Check the draft; on failure record the message and return False."""
        if now is None:
            now = now_in(self.tz)
        violation = validate_meeting(self.draft, now, self.tz)
        if violation:
            self._notify(ERROR, f"error_{violation}")
            return False
        self.error = None
        return True

    def begin_edit(self, meeting):
        self.draft = meeting.copy()
        self.editing_id = meeting.id
        self.error = None

    def cancel_edit(self):
        self.draft = empty_draft()
        self.editing_id = None
        self.error = None

    # ===== Mutations =====

    async def submit(self, now=None):
        """Create or update the draft. The draft is kept when the request fails."""
        if not self.validate(now):
            return False
        editing_id = self.editing_id
        try:
            if editing_id is None:
                await self.service.create_meeting(self.draft)
            else:
                await self.service.update_meeting(editing_id, self.draft)
        except MeetingApiError as e:
            logger.warning("Saving meeting failed: %s", e)
            self.error = self.messages['error_save']
            return False
        await self.load()
        self.notices.append(Notice(SUCCESS, self.messages[
            'notice_updated' if editing_id is not None else 'notice_created']))
        self.draft = empty_draft()
        self.editing_id = None
        return True

    async def delete(self, meeting_id):
        try:
            await self.service.delete_meeting(meeting_id)
        except MeetingApiError as e:
            logger.warning("Deleting meeting %s failed: %s", meeting_id, e)
            self._notify(ERROR, 'error_delete')
            return False
        await self.load()
        self.notices.append(Notice(SUCCESS, self.messages['notice_deleted']))
        return True
