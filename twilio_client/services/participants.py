"""
Video Participants service.

https://www.twilio.com/docs/video/api/participants
"""

from typing import Optional
from urllib.parse import quote

from ..core.models import VideoParticipant, VideoParticipantPage
from ..core.pagination import PageIterator
from ..core.resources import ResourceClient


PARTICIPANTS_PATH = "Rooms/{room_sid}/Participants"


class VideoParticipantService:

    def __init__(self, client: ResourceClient) -> None:
        self._client = client

    async def get(
        self,
        room_sid: str,
        sid_or_identity: str,
        timeout: Optional[float] = None,
    ) -> VideoParticipant:
        return await self._client.get_resource(
            PARTICIPANTS_PATH.format(room_sid=quote(room_sid, safe="")),
            sid_or_identity,
            VideoParticipant,
            timeout=timeout,
        )

    async def get_page_for_room(
        self,
        room_sid: str,
        params=None,
        timeout: Optional[float] = None,
    ) -> VideoParticipantPage:
        """Return the first page of participants for a room."""
        return await self.get_page_iterator(room_sid, params).next(timeout=timeout)

    def get_page_iterator(self, room_sid: str, params=None) -> PageIterator[VideoParticipantPage]:
        path = PARTICIPANTS_PATH.format(room_sid=quote(room_sid, safe=""))
        return PageIterator(self._client, path, params, VideoParticipantPage)
