"""
Error taxonomy for the resource-access layer.

Every failure a caller can see is one of these types. The transport and
resource client translate httpx and pydantic failures into them at the
point where they happen, so callers never need to import either library
to handle errors.

Cancellation is the one exception to the single hierarchy: CanceledError
is asyncio.CancelledError itself, re-raised as it arrived, so a
cancelled task still looks cancelled to the event loop.
"""

import asyncio
from typing import Optional


class TwilioError(Exception):
    """Base class for all errors raised by this library."""
    pass


class TransportError(TwilioError):
    """
    Raised when a request could not be completed at the network level,
    or when the server answered with an error body we could not parse.

    The underlying exception, if any, is available as __cause__.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(TwilioError):
    """Raised when a successful response body does not match the expected model."""

    def __init__(self, message: str, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body


class APIError(TwilioError):
    """
    A well-formed error envelope returned by the API.

    Attributes:
        status_code: HTTP status of the response
        code: Twilio error code (see more_info for documentation)
        message: human-readable error message from the server
        more_info: URL describing the error code
    """

    def __init__(
        self,
        status_code: int,
        code: int,
        message: str,
        more_info: str = "",
    ) -> None:
        super().__init__(f"{status_code} {code}: {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.more_info = more_info


class NotFoundError(APIError):
    """The requested resource does not exist (HTTP 404)."""
    pass


class NoMoreResultsError(TwilioError):
    """Raised by a page iterator once the last page has been returned."""

    def __init__(self, message: str = "No more results") -> None:
        super().__init__(message)


class DeadlineExceededError(TwilioError):
    """The caller-supplied timeout elapsed before the request finished."""

    def __init__(self, message: str, timeout: Optional[float] = None) -> None:
        super().__init__(message)
        self.timeout = timeout


# Cancellation is asyncio's own exception, passed through untouched so
# asyncio.timeout() and TaskGroup still recognise it.
CanceledError = asyncio.CancelledError
