"""
Wireless SIMs service.

https://www.twilio.com/docs/iot/wireless/api/sim-resource
"""

import logging
from typing import Optional

from ..core.models import Sim, SimPage
from ..core.pagination import PageIterator
from ..core.resources import ResourceClient


logger = logging.getLogger(__name__)


SIMS_PATH = "Sims"


class SimService:
    """Fetch, update and list Wireless SIMs."""

    def __init__(self, client: ResourceClient) -> None:
        self._client = client

    async def get(self, sid_or_unique_name: str, timeout: Optional[float] = None) -> Sim:
        return await self._client.get_resource(
            SIMS_PATH, sid_or_unique_name, Sim, timeout=timeout
        )

    async def update(self, sid: str, data, timeout: Optional[float] = None) -> Sim:
        """
        Update a SIM, e.g. {"Status": "suspended"} or {"RatePlan": "WP..."}.
        """
        sim = await self._client.update_resource(SIMS_PATH, sid, data, Sim, timeout=timeout)
        logger.info("Updated SIM", extra={"sim_sid": sid, "fields": sorted(data)})
        return sim

    async def get_page(self, params=None, timeout: Optional[float] = None) -> SimPage:
        return await self.get_page_iterator(params).next(timeout=timeout)

    def get_page_iterator(self, params=None) -> PageIterator[SimPage]:
        return PageIterator(self._client, SIMS_PATH, params, SimPage)
