"""Repository for transaction records."""

from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from banking.models.transaction import Transaction


class TransactionRepository:
    """Append-only data access layer for transactions."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        *,
        account_id: str,
        transaction_type: str,
        amount: Decimal,
        currency: str,
        source_amount: Decimal,
        source_currency: str,
    ) -> Transaction:
        txn = Transaction(
            account_id=account_id,
            transaction_type=transaction_type,
            amount=amount,
            currency=currency,
            source_amount=source_amount,
            source_currency=source_currency,
        )
        self.session.add(txn)
        await self.session.flush()
        await self.session.refresh(txn)
        return txn
