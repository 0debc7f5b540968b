"""Database repositories for data access."""
from banking.repositories.account_repository import AccountRepository
from banking.repositories.transaction_repository import TransactionRepository
from banking.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
    "AccountRepository",
    "TransactionRepository",
]
