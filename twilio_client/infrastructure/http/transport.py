"""
Authenticated HTTP transport for the Twilio REST APIs.

This module is the only place that talks to httpx. It:
1. Attaches Basic auth credentials to every request
2. Encodes form bodies for writes and query strings for reads
3. Translates non-2xx responses into APIError / NotFoundError
4. Translates network failures and per-call deadlines into the
   library's own error types; task cancellation passes through as-is

It never retries. Create calls are not safe to replay, and callers
that want backoff can wrap any operation themselves.
"""

import asyncio
import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import urlencode

import httpx

from ... import __version__
from ...core.errors import (
    APIError,
    DeadlineExceededError,
    NotFoundError,
    TransportError,
)


logger = logging.getLogger(__name__)


FormValue = Union[str, Sequence[str]]
FormParams = Mapping[str, FormValue]

USER_AGENT = f"twilio-client-python/{__version__} httpx/{httpx.__version__}"


@dataclass(frozen=True)
class Credentials:
    """Account sid and auth token sent as Basic auth on every request."""
    account_sid: str
    auth_token: str

    def __post_init__(self) -> None:
        if not self.account_sid:
            raise ValueError("account_sid is required")
        if not self.auth_token:
            raise ValueError("auth_token is required")

    def __repr__(self) -> str:
        return f"Credentials(account_sid={self.account_sid!r}, auth_token='***')"


def encode_params(params: Optional[FormParams]) -> list[tuple[str, str]]:
    """
    Flatten a key -> value(s) mapping into ordered pairs.

    A sequence value becomes one pair per element, so the same key is
    sent several times. Nothing is deduplicated.
    """
    if not params:
        return []
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            pairs.append((key, _stringify(value)))
        else:
            pairs.extend((key, _stringify(item)) for item in value)
    return pairs


def _stringify(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


class HTTPTransport:
    """
    Sends one request per call against a single API base URL.

    Several transports (one per Twilio product host) can share the same
    httpx.AsyncClient. Nothing about an individual request is stored on
    the transport, so concurrent calls are safe.
    """

    def __init__(
        self,
        base_url: str,
        credentials: Credentials,
        http_client: httpx.AsyncClient,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = httpx.BasicAuth(credentials.account_sid, credentials.auth_token)
        self._http = http_client

    @property
    def base_url(self) -> str:
        return self._base_url

    def resolve(self, path: str) -> str:
        """Join a relative path onto the base URL; absolute URLs pass through."""
        if path.startswith(("https://", "http://")):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    async def send(
        self,
        method: str,
        path: str,
        params: Optional[FormParams] = None,
        data: Optional[FormParams] = None,
        timeout: Optional[float] = None,
    ) -> bytes:
        """
        Issue a request and return the raw body of a 2xx response.

        Args:
            method: HTTP verb
            path: path relative to the base URL, or an absolute URL
            params: query parameters
            data: form-encoded body parameters
            timeout: deadline in seconds for the whole call

        Raises:
            APIError / NotFoundError: the server returned an error envelope
            TransportError: network failure or unparseable error body
            DeadlineExceededError: timeout elapsed
            CanceledError: the calling task was cancelled (re-raised unchanged)
        """
        url = self.resolve(path)
        request = self._build_request(method, url, params, data)

        logger.debug(
            "Sending request",
            extra={"method": method, "url": url},
        )

        try:
            if timeout is None:
                response = await self._http.send(request, auth=self._auth)
            else:
                response = await asyncio.wait_for(
                    self._http.send(request, auth=self._auth),
                    timeout=timeout,
                )
        except asyncio.TimeoutError as e:
            logger.warning(
                "Request deadline exceeded",
                extra={"method": method, "url": url, "timeout": timeout},
            )
            raise DeadlineExceededError(
                f"{method} {url} exceeded deadline of {timeout}s", timeout=timeout
            ) from e
        except asyncio.CancelledError:
            logger.info(
                "Request canceled",
                extra={"method": method, "url": url},
            )
            raise
        except httpx.HTTPError as e:
            logger.warning(
                "Transport failure",
                extra={"method": method, "url": url, "error": str(e)},
            )
            raise TransportError(f"{method} {url} failed: {e}") from e

        if 200 <= response.status_code < 300:
            return response.content

        raise self._error_from_response(response, method, url)

    def _build_request(
        self,
        method: str,
        url: str,
        params: Optional[FormParams],
        data: Optional[FormParams],
    ) -> httpx.Request:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        query = encode_params(params)
        body = encode_params(data)
        if body:
            return self._http.build_request(
                method,
                url,
                params=query or None,
                content=urlencode(body).encode("utf-8"),
                headers={**headers, "Content-Type": "application/x-www-form-urlencoded"},
            )
        return self._http.build_request(method, url, params=query or None, headers=headers)

    def _error_from_response(
        self,
        response: httpx.Response,
        method: str,
        url: str,
    ) -> Exception:
        """Build the exception for a non-2xx response. Never raises itself."""
        status_code = response.status_code
        envelope = _parse_error_envelope(response.content)

        if envelope is None:
            logger.warning(
                "Unparseable error response",
                extra={"method": method, "url": url, "status": status_code},
            )
            if status_code == 404:
                return NotFoundError(status_code, 20404, "The requested resource was not found")
            return TransportError(
                f"{method} {url} returned {status_code} with an unreadable body",
                status_code=status_code,
            )

        error_cls = NotFoundError if status_code == 404 else APIError
        logger.warning(
            "API error",
            extra={
                "method": method,
                "url": url,
                "status": status_code,
                "code": envelope["code"],
            },
        )
        return error_cls(
            status_code,
            envelope["code"],
            envelope["message"],
            envelope.get("more_info") or "",
        )


def _parse_error_envelope(body: bytes) -> Optional[dict]:
    """
    Return the error envelope as a dict, or None when the body is not one.

    An envelope needs at least an integer code and a string message.
    """
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    code = payload.get("code")
    message = payload.get("message")
    if not isinstance(code, int) or isinstance(code, bool) or not isinstance(message, str):
        return None
    return payload
