"""Zone operations.

See https://developers.upcloud.com/1.3/5-zones/
"""

import httpx
from pydantic import Field

from upcloud.context import Context
from upcloud.models import Envelope, Resource
from upcloud.services.base import Service


class Zone(Resource):
    id: str = ""
    description: str = ""
    public: str = ""  # yes/no


class ZoneList(Resource):
    zones: list[Zone] = Field(default_factory=list, alias="zone")


class ZoneListEnvelope(Envelope):
    zones: ZoneList = Field(default_factory=ZoneList)


class ZoneService(Service):
    """Zone related methods of the UpCloud API."""

    async def list_available_zones(self, ctx: Context | None) -> tuple[ZoneList, httpx.Response]:
        """Return the description of each zone."""
        return await self._get(ctx, "zone", ZoneListEnvelope, ZoneList)
