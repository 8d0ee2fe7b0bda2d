"""Pricing operations.

See https://developers.upcloud.com/1.3/4-pricing/
"""

from typing import Any

import httpx
from pydantic import Field

from upcloud.context import Context
from upcloud.models import Envelope, Resource
from upcloud.services.base import Service


class UnitPrice(Resource):
    """Price in credits per ``amount`` units."""

    amount: float = 0.0
    price: float = 0.0


def _unit_price(**kwargs: Any) -> Any:
    return Field(default_factory=UnitPrice, **kwargs)


class ZonePricing(Resource):
    """Prices of billable items in one zone."""

    name: str = ""
    firewall: UnitPrice = _unit_price()
    io_request_backup: UnitPrice = _unit_price()
    io_request_hdd: UnitPrice = _unit_price()
    io_request_maxiops: UnitPrice = _unit_price()
    ipv4_address: UnitPrice = _unit_price()
    ipv6_address: UnitPrice = _unit_price()
    public_ipv4_bandwidth_in: UnitPrice = _unit_price()
    public_ipv4_bandwidth_out: UnitPrice = _unit_price()
    public_ipv6_bandwidth_in: UnitPrice = _unit_price()
    public_ipv6_bandwidth_out: UnitPrice = _unit_price()
    # The API spells this key "server_code".
    server_core: UnitPrice = _unit_price(alias="server_code")
    server_memory: UnitPrice = _unit_price()
    storage_backup: UnitPrice = _unit_price()
    storage_hdd: UnitPrice = _unit_price()
    storage_maxiops: UnitPrice = _unit_price()
    storage_template: UnitPrice = _unit_price()


class PriceList(Resource):
    zones: list[ZonePricing] = Field(default_factory=list, alias="zone")


class PriceListEnvelope(Envelope):
    prices: PriceList = Field(default_factory=PriceList)


class PricingService(Service):
    """Pricing related methods of the UpCloud API."""

    async def list_prices(self, ctx: Context | None) -> tuple[PriceList, httpx.Response]:
        """Return the prices per zone."""
        return await self._get(ctx, "price", PriceListEnvelope, PriceList)
