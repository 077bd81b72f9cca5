"""
Async client for the Twilio Video and Wireless REST APIs.

This package contains:
- core: generic resource operations, pagination, models and errors
- infrastructure: the authenticated HTTP transport
- services: typed wrappers for Rooms, Participants and SIMs
- config: settings and client configuration
"""

__version__ = "0.1.0"

from .client import Client, create_client  # noqa: E402
from .core.errors import (  # noqa: E402
    APIError,
    CanceledError,
    DeadlineExceededError,
    DecodeError,
    NoMoreResultsError,
    NotFoundError,
    TransportError,
    TwilioError,
)

__all__ = [
    "Client",
    "create_client",
    "APIError",
    "CanceledError",
    "DeadlineExceededError",
    "DecodeError",
    "NoMoreResultsError",
    "NotFoundError",
    "TransportError",
    "TwilioError",
]
