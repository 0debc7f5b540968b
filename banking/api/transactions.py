"""Deposit and currency conversion endpoints."""

from decimal import Decimal

from fastapi import APIRouter, Depends, Query

from banking.auth.dependencies import CurrentUser
from banking.dependencies import ExchangeRates
from banking.providers import DepositSvc
from banking.schemas.account import CURRENCY_PATTERN
from banking.schemas.transaction import ConversionResponse, DepositRequest, TransactionResponse
from banking.services.deposit_service import quantize_money
from banking.utils.audit import audit_logged

router = APIRouter()


@router.post(
    "/deposit",
    response_model=TransactionResponse,
    dependencies=[Depends(audit_logged("deposit"))],
)
async def deposit(
    body: DepositRequest, current_user: CurrentUser, deposits: DepositSvc
) -> TransactionResponse:
    """Credit one of the caller's accounts, converting currency if needed."""
    return await deposits.deposit(current_user.id, body)


@router.get("/convert", response_model=ConversionResponse)
async def convert(
    rates: ExchangeRates,
    source: str = Query(..., alias="from", pattern=CURRENCY_PATTERN),
    target: str = Query(..., alias="to", pattern=CURRENCY_PATTERN),
    amount: Decimal = Query(..., gt=0),
) -> ConversionResponse:
    """Quote a conversion at the latest exchange rate."""
    rate = await rates.get_rate(source, target)
    return ConversionResponse(
        source_currency=source,
        target_currency=target,
        amount=amount,
        rate=rate,
        converted_amount=quantize_money(amount * rate),
    )
