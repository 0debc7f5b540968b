"""Account API endpoints."""

from fastapi import APIRouter, Depends, status

from banking.auth.dependencies import CurrentUser
from banking.providers import AccountSvc
from banking.schemas.account import AccountCreateRequest, AccountCreateResponse, AccountResponse
from banking.utils.audit import audit_logged

router = APIRouter()


@router.post(
    "/create-account",
    response_model=AccountCreateResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(audit_logged("create_account"))],
)
async def create_account(
    current_user: CurrentUser,
    accounts: AccountSvc,
    body: AccountCreateRequest | None = None,
) -> AccountCreateResponse:
    """Open a new zero-balance account (defaults: checking, USD)."""
    return await accounts.create_account(current_user.id, body or AccountCreateRequest())


@router.get("/accounts", response_model=list[AccountResponse])
async def list_accounts(current_user: CurrentUser, accounts: AccountSvc) -> list[AccountResponse]:
    """List the caller's accounts."""
    return await accounts.list_accounts(current_user.id)
