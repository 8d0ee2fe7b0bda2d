"""Resource services exposed as attributes of ``upcloud.Client``."""

from upcloud.services.accounts import (
    Account,
    AccountInformation,
    AccountList,
    AccountListEntry,
    AccountService,
)
from upcloud.services.base import Service
from upcloud.services.plans import Plan, PlanList, PlanService
from upcloud.services.pricing import PriceList, PricingService, UnitPrice, ZonePricing
from upcloud.services.timezones import TimezoneList, TimezoneService
from upcloud.services.zones import Zone, ZoneList, ZoneService

__all__ = [
    "Account",
    "AccountInformation",
    "AccountList",
    "AccountListEntry",
    "AccountService",
    "Plan",
    "PlanList",
    "PlanService",
    "PriceList",
    "PricingService",
    "Service",
    "TimezoneList",
    "TimezoneService",
    "UnitPrice",
    "Zone",
    "ZoneList",
    "ZonePricing",
    "ZoneService",
]
