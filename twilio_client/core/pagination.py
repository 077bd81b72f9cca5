"""
Cursor-based page iteration.

The API hands back an absolute next_page_url with every page. The
iterator stores it and requests it verbatim on the next call. It never
rebuilds offsets itself, so it stays correct whatever cursor scheme
the server uses.

Exhaustion is detected on the page that comes back without a
next_page_url. That page is still returned; only the call after it
raises NoMoreResultsError.
"""

import logging
from typing import Generic, Optional, TypeVar

from .errors import NoMoreResultsError
from .models import Page
from .resources import ResourceClient


logger = logging.getLogger(__name__)


PageT = TypeVar("PageT", bound=Page)


class PageIterator(Generic[PageT]):
    """
    Walks one listing page by page.

    Not safe for concurrent next() calls on the same instance. Create one
    iterator per concurrent listing; they can all share one client.

    Usage:
        iterator = client.video.rooms.get_page_iterator({"Status": "completed"})
        async for page in iterator:
            for room in page.rooms:
                ...
    """

    def __init__(
        self,
        client: ResourceClient,
        path: str,
        params,
        page_model: type[PageT],
    ) -> None:
        self._client = client
        self._path = path
        self._params = params
        self._page_model = page_model
        self._next_uri = ""
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    async def next(self, timeout: Optional[float] = None) -> PageT:
        """
        Fetch the next page.

        Raises NoMoreResultsError, without touching the network, once the
        previous page reported no next_page_url. If the request fails the
        cursor is left alone, so calling next() again retries the same page.
        """
        if self._exhausted:
            raise NoMoreResultsError()

        if self._next_uri:
            page = await self._client.list_resource(
                self._next_uri, None, self._page_model, timeout=timeout
            )
        else:
            page = await self._client.list_resource(
                self._path, self._params, self._page_model, timeout=timeout
            )

        self._advance(page.next_page_url)

        logger.debug(
            "Fetched page",
            extra={
                "path": self._path,
                "page": page.meta.page,
                "count": len(page.items),
                "exhausted": self._exhausted,
            },
        )
        return page

    def _advance(self, next_page_url: Optional[str]) -> None:
        if next_page_url:
            self._next_uri = next_page_url
        else:
            self._exhausted = True

    def __aiter__(self) -> "PageIterator[PageT]":
        return self

    async def __anext__(self) -> PageT:
        try:
            return await self.next()
        except NoMoreResultsError:
            raise StopAsyncIteration from None
