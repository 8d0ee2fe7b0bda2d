"""Account operations.

See https://developers.upcloud.com/1.3/3-accounts/
"""

import httpx
from pydantic import Field

from upcloud.context import Context
from upcloud.errors import ConfigurationError
from upcloud.models import Envelope, Resource
from upcloud.services.base import Service, path_segment

MODIFY_KINDS = frozenset(["details", "sub"])


class ResourceLimits(Resource):
    """Resource limits of a full account."""

    cores: int = 0  # Maximum number of CPU cores
    detached_floating_ips: int = 0
    memory: int = 0  # MiB
    networks: int = 0
    public_ipv4: int = 0
    public_ipv6: int = 0
    storage_hdd: int = 0  # MiB
    storage_ssd: int = 0  # MiB


class TrialResourceLimits(Resource):
    """Resource limits and current usage of a trial account."""

    trial_firewall_restrictions: int = 0  # 1 when the firewall is disabled
    trial_period_length: int = 0  # hours
    trial_server_max_cores: int = 0
    trial_server_max_memory: int = 0  # MiB
    trial_server_max_public_ipv4: int = 0
    trial_server_max_public_ipv6: int = 0
    trial_storage_max_size: int = 0  # GiB
    trial_storage_tier: str = ""
    trial_total_detached_floating_ips: int = 0
    trial_total_networks: int = 0
    trial_total_public_ipv4: int = 0
    trial_total_public_ipv6: int = 0
    trial_total_server_cores: int = 0
    trial_total_server_memory: int = 0  # GiB
    trial_total_servers: int = 0
    trial_total_storage_size: int = 0  # GiB
    trial_total_storages: int = 0
    user_detached_floating_ips: int = 0
    user_networks: int = 0
    user_public_ipv4: int = 0
    user_public_ipv6: int = 0
    user_server_cores: int = 0
    user_server_memory: int = 0  # MiB


class AccountInformation(Resource):
    """Credits and limits of the authenticated account.

    Exactly one of ``resource_limits`` and ``trial_resource_limits`` is set,
    depending on the account type.
    """

    credits: float = 0.0
    username: str = ""
    resource_limits: ResourceLimits | None = None
    trial_resource_limits: TrialResourceLimits | None = None


class Roles(Resource):
    role: list[str] = Field(default_factory=list)


class AccountListEntry(Resource):
    roles: Roles | None = None
    type: str = ""
    username: str = ""


class AccountList(Resource):
    accounts: list[AccountListEntry] = Field(default_factory=list, alias="account")


class NetworkAccess(Resource):
    networks: list[str] | None = Field(default=None, alias="network")


class ServerAccessEntry(Resource):
    storage: str = ""  # yes/no
    uuid: str = ""


class ServerAccess(Resource):
    servers: list[ServerAccessEntry] | None = Field(default=None, alias="server")


class StorageAccess(Resource):
    storage: list[str] | None = None


class TagAccessEntry(Resource):
    name: str = ""
    storage: str = ""  # yes/no


class TagAccess(Resource):
    tags: list[TagAccessEntry] | None = Field(default=None, alias="tag")


class IPFilters(Resource):
    ip_filters: list[str] | None = Field(default=None, alias="ip_filter")


class Account(Resource):
    """Detailed account, used both when reading and when modifying accounts.

    Unset fields are left out of request bodies.
    """

    main_account: str | None = None
    type: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    address: str | None = None
    postal_code: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    currency: str | None = None  # EUR/GBP/USD/SGD
    language: str | None = None
    phone: str | None = None
    email: str | None = None
    vat_number: str | None = None
    timezone: str | None = None
    password: str | None = None
    roles: Roles | None = None
    allow_api: str | None = None  # yes/no
    allow_gui: str | None = None  # yes/no
    enable_3rd_party_services: str | None = None  # yes/no
    network_access: NetworkAccess | None = None
    server_access: ServerAccess | None = None
    storage_access: StorageAccess | None = None
    tag_access: TagAccess | None = None
    ip_filters: IPFilters | None = None


class AccountInformationEnvelope(Envelope):
    account: AccountInformation = Field(default_factory=AccountInformation)


class AccountListEnvelope(Envelope):
    accounts: AccountList = Field(default_factory=AccountList)


class AccountDetailsEnvelope(Envelope):
    account: Account = Field(default_factory=Account)


class SubAccountEnvelope(Envelope):
    sub_account: Account


class AccountService(Service):
    """Account related methods of the UpCloud API."""

    async def get_account_information(self, ctx: Context | None) -> tuple[AccountInformation, httpx.Response]:
        """Return the credits and resource limits of the account."""
        return await self._get(ctx, "account", AccountInformationEnvelope, AccountInformation)

    async def list_accounts(self, ctx: Context | None) -> tuple[AccountList, httpx.Response]:
        """Return the main account and its sub accounts."""
        return await self._get(ctx, "account/list", AccountListEnvelope, AccountList)

    async def get_account_details(self, ctx: Context | None, username: str) -> tuple[Account, httpx.Response]:
        return await self._get(
            ctx, f"account/details/{path_segment(username)}", AccountDetailsEnvelope, Account
        )

    async def modify_account(
        self,
        ctx: Context | None,
        kind: str,
        account: Account,
        username: str,
    ) -> httpx.Response:
        """Modify an account.

        Prefer ``modify_account_details`` or ``modify_sub_account_details``.
        ``main_account``, ``username``, ``type`` and ``password`` cannot be
        changed this way and are dropped from the request body.

        Args:
            ctx: Request context
            kind: ``"details"`` or ``"sub"``
            account: New field values
            username: Account to modify

        Raises:
            ConfigurationError: If ``kind`` is not supported
        """
        if kind not in MODIFY_KINDS:
            raise ConfigurationError(f"Unsupported account modification kind {kind!r}")

        trimmed = account.model_copy(update={"main_account": None, "username": None, "type": None, "password": None})
        body = AccountDetailsEnvelope(account=trimmed)
        return await self._send(ctx, "PUT", f"account/{kind}/{path_segment(username)}", body)

    async def modify_account_details(self, ctx: Context | None, account: Account, username: str) -> httpx.Response:
        return await self.modify_account(ctx, "details", account, username)

    async def modify_sub_account_details(self, ctx: Context | None, account: Account, username: str) -> httpx.Response:
        return await self.modify_account(ctx, "sub", account, username)

    async def add_sub_account(self, ctx: Context | None, account: Account) -> httpx.Response:
        """Create a sub account from ``account``."""
        return await self._send(ctx, "POST", "account/sub", SubAccountEnvelope(sub_account=account))

    async def delete_sub_account(self, ctx: Context | None, username: str) -> httpx.Response:
        return await self._send(ctx, "DELETE", f"account/sub/{path_segment(username)}")
