import logging
from typing import List, Optional

import httpx

from models import Meeting

logger = logging.getLogger(__name__)

MEETINGS_PATH = '/api/v1/meetings'

class MeetingApiError(Exception):
    """A request to the meetings API failed (non-2xx status or transport fault)."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code

class MeetingService:
    """Async client for the remote /api/v1/meetings collection."""

    def __init__(self, base_url, timeout=10.0, transport=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport

    def _client(self):
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={'Content-Type': 'application/json'},
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(self, method, path, payload=None):
        try:
            async with self._client() as http:
                response = await http.request(method, path, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("%s %s returned %s", method, path, status)
            raise MeetingApiError(f"{method} {path} failed with status {status}", status) from e
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise MeetingApiError(f"{method} {path} failed: {e}") from e
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    @staticmethod
    def _record(response) -> Optional[Meeting]:
        # Create/update bodies are informational; the list is reloaded afterwards
        if not response.content:
            return None
        try:
            data = response.json()
        except ValueError:
            return None
        return Meeting.from_dict(data) if isinstance(data, dict) else None

    async def list_meetings(self) -> List[Meeting]:
        response = await self._request('GET', MEETINGS_PATH)
        try:
            data = response.json()
        except ValueError as e:
            raise MeetingApiError("Meeting list is not valid JSON") from e
        if not isinstance(data, list):
            raise MeetingApiError("Meeting list is not a JSON array")
        return [Meeting.from_dict(m) for m in data]

    async def create_meeting(self, meeting) -> Optional[Meeting]:
        payload = meeting.to_payload()
        payload.pop('id', None)
        response = await self._request('POST', MEETINGS_PATH, payload)
        return self._record(response)

    async def update_meeting(self, meeting_id, meeting) -> Optional[Meeting]:
        payload = meeting.to_payload()
        payload['id'] = meeting_id
        response = await self._request('PUT', f"{MEETINGS_PATH}/{meeting_id}", payload)
        return self._record(response)

    async def delete_meeting(self, meeting_id):
        await self._request('DELETE', f"{MEETINGS_PATH}/{meeting_id}")
