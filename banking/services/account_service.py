"""Service layer for bank accounts."""

import secrets
import string

from banking.errors import ConflictError
from banking.repositories.account_repository import DuplicateAccountNumberError
from banking.repositories.protocols import AccountRepositoryProtocol
from banking.schemas.account import AccountCreateRequest, AccountCreateResponse, AccountResponse

ACCOUNT_NUMBER_LENGTH = 10


def generate_account_number() -> str:
    """Random 10-digit account number."""
    return "".join(secrets.choice(string.digits) for _ in range(ACCOUNT_NUMBER_LENGTH))


class AccountService:
    """Business logic for opening and listing accounts."""

    def __init__(self, repo: AccountRepositoryProtocol):
        self._repo = repo

    async def create_account(
        self, user_id: str, body: AccountCreateRequest
    ) -> AccountCreateResponse:
        """Open a zero-balance account for *user_id*.

        Raises:
            ConflictError: The generated account number was already taken.
        """
        try:
            account = await self._repo.create(
                user_id=user_id,
                account_number=generate_account_number(),
                currency=body.currency,
                account_type=body.account_type.value,
            )
        except DuplicateAccountNumberError as exc:
            raise ConflictError("Failed to allocate an account number, please retry") from exc
        return AccountCreateResponse(account_id=account.id, account_number=account.account_number)

    async def list_accounts(self, user_id: str) -> list[AccountResponse]:
        accounts = await self._repo.list_by_user(user_id)
        return [AccountResponse.model_validate(a) for a in accounts]
