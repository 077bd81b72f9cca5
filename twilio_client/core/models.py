"""
Resource and page models.

These are pydantic models rather than dataclasses because they are built
from JSON the server controls. Every model keeps fields it does not
declare (extra="allow"), so a resource decoded and dumped again keeps
everything the API sent.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict


class Status(str, Enum):
    """Statuses reported by Video and Wireless resources."""
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    FAILED = "failed"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"

    # Wireless SIM lifecycle
    NEW = "new"
    READY = "ready"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    DEACTIVATED = "deactivated"
    CANCELED = "canceled"
    SCHEDULED = "scheduled"
    UPDATING = "updating"


class Resource(BaseModel):
    """
    Base for every server-side entity.

    Addressable by a server-assigned sid, or by a caller-assigned unique
    name where the resource supports one.
    """
    model_config = ConfigDict(extra="allow")

    sid: str = ""
    url: Optional[str] = None
    links: Optional[dict[str, str]] = None


class Meta(BaseModel):
    """Pagination metadata carried in every page envelope."""
    model_config = ConfigDict(extra="allow")

    page: int = 0
    page_size: int = 0
    first_page_url: Optional[str] = None
    previous_page_url: Optional[str] = None
    url: Optional[str] = None
    next_page_url: Optional[str] = None
    key: Optional[str] = None


ResourceT = TypeVar("ResourceT", bound=Resource)


class Page(BaseModel, Generic[ResourceT]):
    """
    A bounded, ordered list of resources plus pagination metadata.

    Subclasses declare the list under the key the API uses for that
    collection and set items_key to the same name. The list is required:
    an envelope without it is a schema mismatch, not an empty page.

        class RoomPage(Page[Room]):
            items_key: ClassVar[str] = "rooms"
            rooms: list[Room]
    """
    model_config = ConfigDict(extra="allow")

    items_key: ClassVar[str] = ""

    meta: Meta

    @property
    def items(self) -> list[ResourceT]:
        """The page's resources, whatever key the API put them under."""
        return getattr(self, self.items_key)

    @property
    def next_page_url(self) -> Optional[str]:
        return self.meta.next_page_url or None


# ---------------------------------------------------------------------------
# Video
# ---------------------------------------------------------------------------

class Room(Resource):
    account_sid: Optional[str] = None
    type: Optional[str] = None
    enable_turn: bool = False
    unique_name: Optional[str] = None
    status_callback: Optional[str] = None
    status_callback_method: Optional[str] = None
    max_participants: Optional[int] = None
    record_participants_on_connect: bool = False
    duration: Optional[int] = None
    media_region: Optional[str] = None
    status: Optional[str] = None
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None
    end_time: Optional[datetime] = None


class RoomPage(Page[Room]):
    items_key: ClassVar[str] = "rooms"

    rooms: list[Room]


class VideoParticipant(Resource):
    """A participant in a Video Room."""
    account_sid: Optional[str] = None
    room_sid: Optional[str] = None
    identity: Optional[str] = None
    duration: Optional[int] = None
    status: Optional[str] = None
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


# Same shape; the Rooms API returns participants through its own endpoint.
RoomParticipant = VideoParticipant


class VideoParticipantPage(Page[VideoParticipant]):
    items_key: ClassVar[str] = "participants"

    participants: list[VideoParticipant]


RoomParticipantPage = VideoParticipantPage


# ---------------------------------------------------------------------------
# Wireless
# ---------------------------------------------------------------------------

class Sim(Resource):
    unique_name: Optional[str] = None
    account_sid: Optional[str] = None
    rate_plan_sid: Optional[str] = None
    friendly_name: Optional[str] = None
    iccid: Optional[str] = None
    e_id: Optional[str] = None
    status: Optional[str] = None
    commands_callback_url: Optional[str] = None
    commands_callback_method: Optional[str] = None
    sms_fallback_method: Optional[str] = None
    sms_fallback_url: Optional[str] = None
    sms_method: Optional[str] = None
    sms_url: Optional[str] = None
    voice_fallback_method: Optional[str] = None
    voice_fallback_url: Optional[str] = None
    voice_method: Optional[str] = None
    voice_url: Optional[str] = None
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None


class SimPage(Page[Sim]):
    items_key: ClassVar[str] = "sims"

    sims: list[Sim]
