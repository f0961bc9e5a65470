from __future__ import annotations

from blcli.models.common import BLModel


class Account(BLModel):
    email: str = ""
    server_limit: int = 0
    email_verified: bool = False
    uuid: str = ""
    status: str = ""
    status_message: str = ""


class Balance(BLModel):
    month_to_date_balance: str = ""
    account_balance: str = ""
    month_to_date_usage: str = ""
    generated_at: str = ""
