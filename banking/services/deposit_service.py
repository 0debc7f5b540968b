"""Service layer for deposits with currency conversion."""

import logging
from decimal import ROUND_HALF_EVEN, Decimal

from banking.clients.exchange_rates import ExchangeRateClient
from banking.errors import ForbiddenError, NotFoundError, ValidationError
from banking.models.transaction import TransactionType
from banking.repositories.protocols import (
    AccountRepositoryProtocol,
    TransactionRepositoryProtocol,
)
from banking.schemas.transaction import DepositRequest, TransactionResponse

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_EVEN)


class DepositService:
    """Credits accounts, converting the deposit into the account's currency.

    The balance update and the transaction record are written in the same
    unit of work, so either both persist or neither does.
    """

    def __init__(
        self,
        accounts: AccountRepositoryProtocol,
        transactions: TransactionRepositoryProtocol,
        rates: ExchangeRateClient,
    ):
        self._accounts = accounts
        self._transactions = transactions
        self._rates = rates

    async def deposit(self, user_id: str, body: DepositRequest) -> TransactionResponse:
        """Deposit into one of the caller's accounts.

        Raises:
            NotFoundError: Unknown account number.
            ForbiddenError: The account belongs to someone else.
            UpstreamServiceError: The exchange rate could not be fetched.
        """
        account = await self._accounts.get_by_number(body.account_number, for_update=True)
        if account is None:
            raise NotFoundError("Account not found")
        if account.user_id != user_id:
            raise ForbiddenError("Account does not belong to the user")

        credited = body.amount
        if body.currency != account.currency:
            rate = await self._rates.get_rate(body.currency, account.currency)
            credited = quantize_money(body.amount * rate)
            if credited <= 0:
                raise ValidationError("Deposit amount is too small after conversion")

        await self._accounts.update_balance(account, account.balance + credited)
        txn = await self._transactions.create(
            account_id=account.id,
            transaction_type=TransactionType.DEPOSIT.value,
            amount=credited,
            currency=account.currency,
            source_amount=body.amount,
            source_currency=body.currency,
        )
        logger.info(
            "Deposited %s %s into account %s", credited, account.currency, account.id
        )
        return TransactionResponse.model_validate(txn)

