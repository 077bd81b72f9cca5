"""
Top-level client.

A Client is built once and shared. It owns the connection pool and one
ResourceClient per API host; the services hanging off it hold nothing
but a reference to those.

Usage:
    async with Client("AC123", "token") as client:
        room = await client.video.rooms.get("daily-standup")
        sim = await client.wireless.sims.get("DE123")
"""

import logging
from typing import Optional

import httpx

from .config.settings import ClientConfig, get_settings
from .core.resources import ResourceClient
from .infrastructure.http.transport import Credentials, HTTPTransport
from .services import RoomService, SimService, VideoParticipantService


logger = logging.getLogger(__name__)


class VideoNamespace:
    """Services hosted on video.twilio.com."""

    def __init__(self, client: ResourceClient) -> None:
        self.rooms = RoomService(client)
        self.participants = VideoParticipantService(client)


class WirelessNamespace:
    """Services hosted on wireless.twilio.com."""

    def __init__(self, client: ResourceClient) -> None:
        self.sims = SimService(client)


class Client:
    """
    Entry point for all API calls.

    Args:
        account_sid: account identifier, used as the Basic auth username
        auth_token: auth token or API key secret
        transport: optional httpx transport, e.g. httpx.MockTransport in tests
        config: full configuration; overrides account_sid/auth_token when given
    """

    def __init__(
        self,
        account_sid: str = "",
        auth_token: str = "",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self._config = config or ClientConfig(account_sid=account_sid, auth_token=auth_token)
        credentials = Credentials(self._config.account_sid, self._config.auth_token)

        self._http = httpx.AsyncClient(
            transport=transport,
            timeout=self._config.timeout_seconds,
            follow_redirects=False,
        )

        self.video = VideoNamespace(
            ResourceClient(HTTPTransport(self._config.video_base_url, credentials, self._http))
        )
        self.wireless = WirelessNamespace(
            ResourceClient(HTTPTransport(self._config.wireless_base_url, credentials, self._http))
        )

        logger.debug(
            "Initialized client",
            extra={
                "account_sid": self._config.account_sid,
                "video_base_url": self._config.video_base_url,
                "wireless_base_url": self._config.wireless_base_url,
            },
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()


# ---------------------------------------------------------------------------
# Factory Function
# ---------------------------------------------------------------------------

def create_client(
    account_sid: Optional[str] = None,
    auth_token: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Client:
    """
    Build a Client from explicit credentials, falling back to
    TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN and the other TWILIO_* settings.
    """
    settings = get_settings()

    sid = account_sid or settings.account_sid
    token = auth_token or settings.auth_token
    if not sid or not token:
        raise ValueError(
            "Credentials must be provided or set in TWILIO_ACCOUNT_SID "
            "and TWILIO_AUTH_TOKEN environment variables"
        )

    config = ClientConfig.from_settings(
        settings.model_copy(update={"account_sid": sid, "auth_token": token})
    )
    return Client(transport=transport, config=config)
