from __future__ import annotations

from typing import Any

from blcli.displayers.base import ResourceDisplayer
from blcli.models.account import Account, Balance


class AccountDisplayer(ResourceDisplayer[Account]):
    single_object = True
    columns = ("Email", "ServerLimit", "EmailVerified", "UUID", "Status")
    headers = {"ServerLimit": "Server Limit", "EmailVerified": "Email Verified"}

    def row(self, item: Account) -> dict[str, Any]:
        return {
            "Email": item.email,
            "ServerLimit": item.server_limit,
            "EmailVerified": item.email_verified,
            "UUID": item.uuid,
            "Status": item.status,
        }


class BalanceDisplayer(ResourceDisplayer[Balance]):
    single_object = True
    columns = ("MonthToDateBalance", "AccountBalance", "MonthToDateUsage", "GeneratedAt")
    headers = {
        "MonthToDateBalance": "Month-to-date Balance",
        "AccountBalance": "Account Balance",
        "MonthToDateUsage": "Month-to-date Usage",
        "GeneratedAt": "Generated At",
    }

    def row(self, item: Balance) -> dict[str, Any]:
        return {
            "MonthToDateBalance": item.month_to_date_balance,
            "AccountBalance": item.account_balance,
            "MonthToDateUsage": item.month_to_date_usage,
            "GeneratedAt": item.generated_at,
        }
