"""
Shared fixtures for unit tests.

No test here touches the network: respx intercepts every httpx request
made by the client, and tests that need finer control inject an
httpx.MockTransport instead.
"""

from collections.abc import AsyncIterator, Iterator
from typing import Optional

import pytest
import respx

from twilio_client import Client


ACCOUNT_SID = "AC123"
AUTH_TOKEN = "secret-token"
VIDEO_BASE = "https://video.twilio.com/v1"
WIRELESS_BASE = "https://wireless.twilio.com/v1"


def make_room(sid: str = "RM123", **overrides) -> dict:
    room = {
        "sid": sid,
        "account_sid": ACCOUNT_SID,
        "type": "group",
        "enable_turn": True,
        "unique_name": "daily-standup",
        "status_callback": None,
        "status_callback_method": "POST",
        "max_participants": 50,
        "record_participants_on_connect": False,
        "duration": None,
        "media_region": "us1",
        "status": "in-progress",
        "date_created": "2017-04-03T22:21:13Z",
        "date_updated": "2017-04-03T22:21:13Z",
        "end_time": None,
        "url": f"{VIDEO_BASE}/Rooms/{sid}",
        "links": {
            "participants": f"{VIDEO_BASE}/Rooms/{sid}/Participants",
            "recordings": f"{VIDEO_BASE}/Rooms/{sid}/Recordings",
        },
    }
    room.update(overrides)
    return room


def make_participant(sid: str = "PA123", room_sid: str = "RM123", **overrides) -> dict:
    participant = {
        "sid": sid,
        "room_sid": room_sid,
        "account_sid": ACCOUNT_SID,
        "identity": f"user-{sid}",
        "status": "connected",
        "duration": None,
        "date_created": "2017-04-03T22:21:13Z",
        "date_updated": "2017-04-03T22:21:13Z",
        "start_time": "2017-04-03T22:21:13Z",
        "end_time": None,
        "url": f"{VIDEO_BASE}/Rooms/{room_sid}/Participants/{sid}",
        "links": {},
    }
    participant.update(overrides)
    return participant


def make_sim(sid: str = "DE123", **overrides) -> dict:
    sim = {
        "sid": sid,
        "unique_name": "tracker-01",
        "account_sid": ACCOUNT_SID,
        "rate_plan_sid": "WP123",
        "friendly_name": None,
        "iccid": "8901260882225666666",
        "e_id": None,
        "status": "active",
        "date_created": "2017-04-03T22:21:13Z",
        "date_updated": "2017-04-03T22:21:13Z",
        "url": f"{WIRELESS_BASE}/Sims/{sid}",
        "links": {"usage_records": f"{WIRELESS_BASE}/Sims/{sid}/UsageRecords"},
    }
    sim.update(overrides)
    return sim


def make_page(key: str, items: list, next_page_url: Optional[str], page: int = 0) -> dict:
    return {
        key: items,
        "meta": {
            "page": page,
            "page_size": 50,
            "first_page_url": f"{VIDEO_BASE}/Rooms?PageSize=50&Page=0",
            "previous_page_url": None,
            "url": f"{VIDEO_BASE}/Rooms?PageSize=50&Page={page}",
            "next_page_url": next_page_url,
            "key": key,
        },
    }


@pytest.fixture
def rsps() -> Iterator[respx.MockRouter]:
    with respx.mock(assert_all_mocked=True, assert_all_called=False) as router:
        yield router


@pytest.fixture
async def client() -> AsyncIterator[Client]:
    async with Client(ACCOUNT_SID, AUTH_TOKEN) as c:
        yield c
