"""Protocol definitions for repository interfaces.

These protocols enable type-safe fakes in tests and decouple service
layer code from concrete SQLAlchemy implementations.
"""

from decimal import Decimal
from typing import Protocol

from banking.models.account import Account
from banking.models.transaction import Transaction
from banking.models.user import User


class UserRepositoryProtocol(Protocol):
    """Interface for credential storage."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def get_by_dni(self, dni: str) -> User | None: ...

    async def create(self, *, dni: str, pin_hash: str, full_name: str, email: str) -> User: ...

    async def update_pin_hash(self, user_id: str, pin_hash: str) -> User | None: ...


class AccountRepositoryProtocol(Protocol):
    """Interface for account data access."""

    async def create(
        self, *, user_id: str, account_number: str, currency: str, account_type: str
    ) -> Account: ...

    async def list_by_user(self, user_id: str) -> list[Account]: ...

    async def get_by_number(self, account_number: str, *, for_update: bool = False) -> Account | None: ...

    async def update_balance(self, account: Account, balance: Decimal) -> Account: ...


class TransactionRepositoryProtocol(Protocol):
    """Interface for transaction record persistence."""

    async def create(
        self,
        *,
        account_id: str,
        transaction_type: str,
        amount: Decimal,
        currency: str,
        source_amount: Decimal,
        source_currency: str,
    ) -> Transaction: ...
