"""Pydantic schemas for accounts."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from banking.models.account import AccountType

CURRENCY_PATTERN = r"^[A-Z]{3}$"


class AccountCreateRequest(BaseModel):
    """Missing or empty fields fall back to a USD checking account."""

    account_type: AccountType = AccountType.CHECKING
    currency: str = Field(default="USD", pattern=CURRENCY_PATTERN)

    @field_validator("account_type", mode="before")
    @classmethod
    def default_account_type(cls, v: object) -> object:
        return AccountType.CHECKING if v in (None, "") else v

    @field_validator("currency", mode="before")
    @classmethod
    def default_currency(cls, v: object) -> object:
        if v in (None, ""):
            return "USD"
        return v.upper() if isinstance(v, str) else v


class AccountCreateResponse(BaseModel):
    account_id: str
    account_number: str


class AccountResponse(BaseModel):
    """Public account information."""

    id: str
    user_id: str
    account_number: str
    balance: Decimal
    currency: str
    account_type: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
