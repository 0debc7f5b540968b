"""Pydantic schemas for deposits and currency conversion."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from banking.schemas.account import CURRENCY_PATTERN


class DepositRequest(BaseModel):
    """Schema for a deposit into one of the caller's accounts."""

    account_number: str = Field(..., min_length=1, max_length=10)
    amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
    currency: str = Field(..., pattern=CURRENCY_PATTERN)

    @field_validator("currency", mode="before")
    @classmethod
    def upper_currency(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class TransactionResponse(BaseModel):
    """A recorded balance movement."""

    id: str
    account_id: str
    transaction_type: str
    amount: Decimal
    currency: str
    source_amount: Decimal
    source_currency: str
    timestamp: datetime

    model_config = {"from_attributes": True}


class ConversionResponse(BaseModel):
    """Result of a currency conversion quote."""

    source_currency: str = Field(..., serialization_alias="from")
    target_currency: str = Field(..., serialization_alias="to")
    amount: Decimal
    rate: Decimal
    converted_amount: Decimal
