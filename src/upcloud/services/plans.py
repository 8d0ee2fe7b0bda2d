"""Plan operations.

See https://developers.upcloud.com/1.3/7-plans/
"""

import httpx
from pydantic import Field

from upcloud.context import Context
from upcloud.models import Envelope, Resource
from upcloud.services.base import Service


class Plan(Resource):
    """Preconfigured server size."""

    core_number: int = 0
    memory_amount: int = 0  # MiB
    name: str = ""
    public_traffic_out: int = 0  # GiB
    storage_size: int = 0  # GiB
    storage_tier: str = ""


class PlanList(Resource):
    plans: list[Plan] = Field(default_factory=list, alias="plan")


class PlanListEnvelope(Envelope):
    plans: PlanList = Field(default_factory=PlanList)


class PlanService(Service):
    """Plan related methods of the UpCloud API."""

    async def list_available_plans(self, ctx: Context | None) -> tuple[PlanList, httpx.Response]:
        return await self._get(ctx, "plan", PlanListEnvelope, PlanList)
