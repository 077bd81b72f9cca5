"""
Generic resource operations.

ResourceClient knows how to get, create, update, delete and list any
resource, given a path and the pydantic model to decode into. The typed
services in twilio_client.services are thin wrappers that only supply
those two things.
"""

import logging
from typing import Optional, Protocol, TypeVar, overload
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from .errors import DecodeError
from .models import Page


logger = logging.getLogger(__name__)


ModelT = TypeVar("ModelT", bound=BaseModel)
PageT = TypeVar("PageT", bound=Page)


class Transport(Protocol):
    """
    Anything that can send a request and hand back the raw 2xx body.

    HTTPTransport is the real implementation; tests may pass their own.
    """

    async def send(
        self,
        method: str,
        path: str,
        params=None,
        data=None,
        timeout: Optional[float] = None,
    ) -> bytes:
        ...


def join_path(path: str, sid: str) -> str:
    """
    Append a sid or unique name to a collection path.

    The identifier is percent-encoded as a single path segment, so a unique
    name containing /, ? or # still addresses exactly one resource.
    """
    if not sid:
        raise ValueError("A sid or unique name is required")
    return f"{path.rstrip('/')}/{quote(sid, safe='')}"


def decode(body: bytes, model: type[ModelT]) -> ModelT:
    """
    Decode a JSON body into model.

    Any JSON syntax error or schema mismatch becomes DecodeError, so a
    server/client disagreement is never mistaken for an API error.
    """
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        logger.error(
            "Failed to decode response",
            extra={"model": model.__name__, "error_count": e.error_count()},
        )
        raise DecodeError(f"Could not decode {model.__name__}: {e}", body=body) from e


class ResourceClient:
    """
    CRUD and list operations against one API host.

    Holds no per-call state: one instance is shared by every service and
    iterator that talks to the same host.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    async def get_resource(
        self,
        path: str,
        sid_or_unique_name: str,
        model: type[ModelT],
        timeout: Optional[float] = None,
    ) -> ModelT:
        """GET path/sid and decode the body. 404 raises NotFoundError."""
        body = await self._transport.send(
            "GET", join_path(path, sid_or_unique_name), timeout=timeout
        )
        return decode(body, model)

    async def create_resource(
        self,
        path: str,
        data,
        model: type[ModelT],
        timeout: Optional[float] = None,
    ) -> ModelT:
        """POST the form data to path and decode the created resource."""
        body = await self._transport.send("POST", path, data=data, timeout=timeout)
        return decode(body, model)

    @overload
    async def update_resource(
        self, path: str, sid: str, data, model: type[ModelT], timeout: Optional[float] = None
    ) -> ModelT: ...

    @overload
    async def update_resource(
        self, path: str, sid: str, data, model: None = None, timeout: Optional[float] = None
    ) -> None: ...

    async def update_resource(self, path, sid, data, model=None, timeout=None):
        """
        POST the form data to path/sid.

        Pass model=None when only success or failure matters; the body is
        then discarded without being parsed.
        """
        body = await self._transport.send(
            "POST", join_path(path, sid), data=data, timeout=timeout
        )
        if model is None:
            return None
        return decode(body, model)

    async def delete_resource(
        self,
        path: str,
        sid: str,
        timeout: Optional[float] = None,
    ) -> None:
        await self._transport.send("DELETE", join_path(path, sid), timeout=timeout)

    async def list_resource(
        self,
        path: str,
        params,
        page_model: type[PageT],
        timeout: Optional[float] = None,
    ) -> PageT:
        """
        GET a page of a collection.

        path may also be an absolute next-page URL, in which case params
        should be None: the URL already carries the query.
        """
        body = await self._transport.send("GET", path, params=params, timeout=timeout)
        return decode(body, page_model)
