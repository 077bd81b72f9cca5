"""
Generic resource-access layer.

Nothing here knows about rooms or SIMs. It decodes JSON into whatever
model it is given and pages through whatever collection it is pointed at.
"""

from .errors import (
    APIError,
    CanceledError,
    DeadlineExceededError,
    DecodeError,
    NoMoreResultsError,
    NotFoundError,
    TransportError,
    TwilioError,
)
from .models import Meta, Page, Resource, Status
from .pagination import PageIterator
from .resources import ResourceClient

__all__ = [
    "APIError",
    "CanceledError",
    "DeadlineExceededError",
    "DecodeError",
    "NoMoreResultsError",
    "NotFoundError",
    "TransportError",
    "TwilioError",
    "Meta",
    "Page",
    "Resource",
    "Status",
    "PageIterator",
    "ResourceClient",
]
