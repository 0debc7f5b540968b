"""FastAPI dependency providers for repositories and services.

Separated from ``dependencies.py`` so route modules can import the
service type aliases without pulling in each other. Tests swap the
repository providers for in-memory fakes via ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from banking.dependencies import DBSession, ExchangeRates, Issuer
from banking.repositories.account_repository import AccountRepository
from banking.repositories.protocols import (
    AccountRepositoryProtocol,
    TransactionRepositoryProtocol,
    UserRepositoryProtocol,
)
from banking.repositories.transaction_repository import TransactionRepository
from banking.repositories.user_repository import UserRepository
from banking.services.account_service import AccountService
from banking.services.auth_service import AuthService
from banking.services.deposit_service import DepositService

# ---------------------------------------------------------------------------
# Repository providers
# ---------------------------------------------------------------------------


def get_user_repository(db: DBSession) -> UserRepositoryProtocol:
    return UserRepository(db)


def get_account_repository(db: DBSession) -> AccountRepositoryProtocol:
    return AccountRepository(db)


def get_transaction_repository(db: DBSession) -> TransactionRepositoryProtocol:
    return TransactionRepository(db)


UserRepo = Annotated[UserRepositoryProtocol, Depends(get_user_repository)]
AccountRepo = Annotated[AccountRepositoryProtocol, Depends(get_account_repository)]
TransactionRepo = Annotated[TransactionRepositoryProtocol, Depends(get_transaction_repository)]

# ---------------------------------------------------------------------------
# Service providers
# ---------------------------------------------------------------------------


def get_auth_service(repo: UserRepo, issuer: Issuer) -> AuthService:
    return AuthService(repo, issuer)


def get_account_service(repo: AccountRepo) -> AccountService:
    return AccountService(repo)


def get_deposit_service(
    accounts: AccountRepo, transactions: TransactionRepo, rates: ExchangeRates
) -> DepositService:
    return DepositService(accounts, transactions, rates)


AuthSvc = Annotated[AuthService, Depends(get_auth_service)]
AccountSvc = Annotated[AccountService, Depends(get_account_service)]
DepositSvc = Annotated[DepositService, Depends(get_deposit_service)]
