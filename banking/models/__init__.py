"""Database models package."""

from banking.models.account import Account, AccountType
from banking.models.base import Base
from banking.models.transaction import Transaction, TransactionType
from banking.models.user import User

__all__ = [
    # Base
    "Base",
    # Models
    "User",
    "Account",
    "Transaction",
    # Enums
    "AccountType",
    "TransactionType",
]
