"""Timezone operations.

See https://developers.upcloud.com/1.3/6-timezones/
"""

import httpx
from pydantic import Field

from upcloud.context import Context
from upcloud.models import Envelope, Resource
from upcloud.services.base import Service


class TimezoneList(Resource):
    timezones: list[str] = Field(default_factory=list, alias="timezone")


class TimezoneListEnvelope(Envelope):
    timezones: TimezoneList = Field(default_factory=TimezoneList)


class TimezoneService(Service):
    """Timezone related methods of the UpCloud API."""

    async def list_timezones(self, ctx: Context | None) -> tuple[TimezoneList, httpx.Response]:
        """Return the names of all timezones the API accepts."""
        return await self._get(ctx, "timezone", TimezoneListEnvelope, TimezoneList)
