"""
Video Rooms service.

https://www.twilio.com/docs/video/api/rooms-resource
"""

import logging
from typing import Optional
from urllib.parse import quote

from ..core.models import Room, RoomPage, RoomParticipant, RoomParticipantPage, Status
from ..core.pagination import PageIterator
from ..core.resources import ResourceClient


logger = logging.getLogger(__name__)


ROOMS_PATH = "Rooms"
PARTICIPANTS_PATH = ROOMS_PATH + "/{room}/Participants"


def _participants_path(room: str) -> str:
    return PARTICIPANTS_PATH.format(room=quote(room, safe=""))


class RoomService:
    """Create, fetch, complete and list Video Rooms."""

    def __init__(self, client: ResourceClient) -> None:
        self._client = client

    async def get(self, sid_or_unique_name: str, timeout: Optional[float] = None) -> Room:
        """Fetch a single Room by its sid or unique name."""
        return await self._client.get_resource(
            ROOMS_PATH, sid_or_unique_name, Room, timeout=timeout
        )

    async def create(self, data, timeout: Optional[float] = None) -> Room:
        """
        Create a Room.

        data holds the API's own field names, e.g.
        {"UniqueName": "daily-standup", "Type": "group"}.
        """
        room = await self._client.create_resource(ROOMS_PATH, data, Room, timeout=timeout)
        logger.info("Created room", extra={"room_sid": room.sid})
        return room

    async def complete(self, sid: str, timeout: Optional[float] = None) -> Room:
        """
        Complete an in-progress Room.

        All connected participants are disconnected immediately.
        """
        data = {"Status": Status.COMPLETED.value}
        room = await self._client.update_resource(ROOMS_PATH, sid, data, Room, timeout=timeout)
        logger.info("Completed room", extra={"room_sid": sid})
        return room

    async def get_page(self, params=None, timeout: Optional[float] = None) -> RoomPage:
        """Return the first page of Rooms matching params."""
        return await self.get_page_iterator(params).next(timeout=timeout)

    def get_page_iterator(self, params=None) -> PageIterator[RoomPage]:
        return PageIterator(self._client, ROOMS_PATH, params, RoomPage)

    async def list_participants(
        self,
        room: str,
        params=None,
        timeout: Optional[float] = None,
    ) -> list[RoomParticipant]:
        """Return one page of participants in a room (sid or unique name)."""
        page = await self._client.list_resource(
            _participants_path(room), params, RoomParticipantPage, timeout=timeout
        )
        return page.participants

    async def remove_participant(
        self,
        room: str,
        identity: str,
        timeout: Optional[float] = None,
    ) -> None:
        """Kick a participant out of a room."""
        data = {"Status": Status.DISCONNECTED.value}
        await self._client.update_resource(
            _participants_path(room), identity, data, timeout=timeout
        )
        logger.info(
            "Removed participant",
            extra={"room": room, "identity": identity},
        )
