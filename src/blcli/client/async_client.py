from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx

from blcli.config import ConfigInput, ProfileConfig, SDKConfig, load_config
from blcli.errors import ConfigError
from blcli.http import BinaryLaneTransport
from blcli.services import (
    AccountService,
    ActionsService,
    BalanceService,
    DomainsService,
    FirewallsService,
    FloatingIPsService,
    LoadBalancersService,
    RegionsService,
    ServersService,
    VPCsService,
)
from blcli.settings import RuntimeSettings

JsonObject = dict[str, Any]
RequestParams = Mapping[str, str | int | float | bool]


def _secret_to_str(value: object) -> str | None:
    if value is None:
        return None
    getter = getattr(value, "get_secret_value", None)
    if callable(getter):
        secret = getter()
        return str(secret) if secret else None
    raw = str(value)
    return raw if raw else None


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


class AsyncBinaryLaneClient:
    """Async BinaryLane API client.

    Settings resolve in order: explicit arguments, ``BL_*`` environment
    variables, the selected config profile, then built-in defaults.
    """

    def __init__(
        self,
        config: ConfigInput | None = None,
        *,
        config_path: str | Path | None = None,
        profile: str | None = None,
        access_token: str | None = None,
        base_url: str | None = None,
        request_timeout_seconds: float | None = None,
        verify_ssl: bool | None = None,
        per_page: int | None = None,
        max_pages: int | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._runtime = RuntimeSettings()
        resolved = load_config(config, config_path=config_path)
        self._resolved_config = resolved
        self.config: SDKConfig = resolved.data

        self._profile_name, resolved_profile = self._resolve_profile(profile=profile)

        self._access_token = (
            access_token or _secret_to_str(self._runtime.access_token) or _secret_to_str(resolved_profile.access_token)
        )
        self.base_url = base_url or self._runtime.base_url or resolved_profile.base_url
        self.request_timeout_seconds = _first_set(
            request_timeout_seconds,
            self._runtime.request_timeout_seconds,
            resolved_profile.request_timeout_seconds,
        )
        self.verify_ssl = _first_set(verify_ssl, self._runtime.verify_ssl, resolved_profile.verify_ssl)
        self.per_page: int = _first_set(per_page, self._runtime.per_page, resolved_profile.per_page)
        self.max_pages: int = _first_set(max_pages, self._runtime.max_pages, resolved_profile.max_pages)

        self._transport = BinaryLaneTransport(
            base_url=self.base_url,
            access_token=self._access_token,
            timeout=self.request_timeout_seconds,
            verify_tls=self.verify_ssl,
            http_client=http_client,
        )

        self._account: AccountService | None = None
        self._balance: BalanceService | None = None
        self._actions: ActionsService | None = None
        self._regions: RegionsService | None = None
        self._domains: DomainsService | None = None
        self._vpcs: VPCsService | None = None
        self._load_balancers: LoadBalancersService | None = None
        self._firewalls: FirewallsService | None = None
        self._floating_ips: FloatingIPsService | None = None
        self._servers: ServersService | None = None

    def _resolve_profile(self, *, profile: str | None) -> tuple[str, ProfileConfig]:
        selected = (
            profile
            or self._runtime.profile
            or self.config.active_profile
            or self.config.default_profile
            or "default"
        )

        profile_config = self.config.profiles.get(selected)
        if profile_config is None:
            if selected != "default" and (profile is not None or self._runtime.profile is not None):
                raise ConfigError(f"profile '{selected}' not found")
            profile_config = ProfileConfig()

        return selected, profile_config

    @property
    def profile_name(self) -> str:
        return self._profile_name

    @property
    def access_token(self) -> str | None:
        return self._access_token

    @property
    def config_path(self) -> Path | None:
        return self._resolved_config.path

    @property
    def account(self) -> AccountService:
        if self._account is None:
            self._account = AccountService(self)
        return self._account

    @property
    def balance(self) -> BalanceService:
        if self._balance is None:
            self._balance = BalanceService(self)
        return self._balance

    @property
    def actions(self) -> ActionsService:
        if self._actions is None:
            self._actions = ActionsService(self)
        return self._actions

    @property
    def regions(self) -> RegionsService:
        if self._regions is None:
            self._regions = RegionsService(self)
        return self._regions

    @property
    def domains(self) -> DomainsService:
        if self._domains is None:
            self._domains = DomainsService(self)
        return self._domains

    @property
    def vpcs(self) -> VPCsService:
        if self._vpcs is None:
            self._vpcs = VPCsService(self)
        return self._vpcs

    @property
    def load_balancers(self) -> LoadBalancersService:
        if self._load_balancers is None:
            self._load_balancers = LoadBalancersService(self)
        return self._load_balancers

    @property
    def firewalls(self) -> FirewallsService:
        if self._firewalls is None:
            self._firewalls = FirewallsService(self)
        return self._firewalls

    @property
    def floating_ips(self) -> FloatingIPsService:
        if self._floating_ips is None:
            self._floating_ips = FloatingIPsService(self)
        return self._floating_ips

    @property
    def servers(self) -> ServersService:
        if self._servers is None:
            self._servers = ServersService(self)
        return self._servers

    async def __aenter__(self) -> AsyncBinaryLaneClient:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: RequestParams | None = None,
        json_data: Mapping[str, Any] | None = None,
    ) -> JsonObject:
        return await self._transport.request_json(method, path, params=params, json_data=json_data)

