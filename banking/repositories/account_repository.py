"""Repository for bank account data access."""

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from banking.models.account import Account


class DuplicateAccountNumberError(Exception):
    """Raised when a generated account number collides with an existing one."""

    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__(f"Account number '{account_number}' already exists")


class AccountRepository:
    """Data access layer for accounts."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self, *, user_id: str, account_number: str, currency: str, account_type: str
    ) -> Account:
        """Create a zero-balance account.

        Raises:
            DuplicateAccountNumberError: If *account_number* is taken.
        """
        account = Account(
            user_id=user_id,
            account_number=account_number,
            balance=Decimal("0"),
            currency=currency,
            account_type=account_type,
        )
        self.session.add(account)
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateAccountNumberError(account_number)
        await self.session.refresh(account)
        return account

    async def list_by_user(self, user_id: str) -> list[Account]:
        result = await self.session.execute(
            select(Account).where(Account.user_id == user_id).order_by(Account.created_at)
        )
        return list(result.scalars().all())

    async def get_by_number(self, account_number: str, *, for_update: bool = False) -> Account | None:
        """Get an account by number, optionally row-locking it until commit."""
        query = select(Account).where(Account.account_number == account_number)
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def update_balance(self, account: Account, balance: Decimal) -> Account:
        account.balance = balance
        await self.session.flush()
        await self.session.refresh(account)
        return account
