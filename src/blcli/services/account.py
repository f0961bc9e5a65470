from __future__ import annotations

from blcli.errors import RequestError
from blcli.models.account import Account, Balance
from blcli.services.base import ServiceBase, parse_resource


class AccountService(ServiceBase):
    """Account API operations."""

    async def get(self) -> Account:
        return await self._get_one("/v2/account", "account", Account)


class BalanceService(ServiceBase):
    """Customer balance API operations."""

    async def get(self) -> Balance:
        data = await self._client._request_json("GET", "/v2/customers/my/balance")
        if not data:
            raise RequestError("unexpected response: empty balance body")
        return parse_resource(Balance, data, label="balance")
