"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, Request, status

from banking.auth.dependencies import CurrentUser, get_current_user
from banking.providers import AuthSvc
from banking.rate_limit import LOGIN_RATE_LIMIT, limiter
from banking.schemas.auth import (
    ChangePinRequest,
    ChangePinResponse,
    ErrorResponse,
    LoginRequest,
    RefreshRequest,
    SignupRequest,
    SignupResponse,
    StatusResponse,
    TokenResponse,
    UserResponse,
)
from banking.utils.audit import audit_logged

router = APIRouter()

_UNAUTHORIZED = {status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}}


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
async def signup(body: SignupRequest, auth: AuthSvc) -> SignupResponse:
    """Register a user. The generated PIN is shown in this response only."""
    return await auth.signup(body.dni, body.full_name, body.email)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={**_UNAUTHORIZED, status.HTTP_429_TOO_MANY_REQUESTS: {"model": ErrorResponse}},
)
@limiter.limit(LOGIN_RATE_LIMIT)
async def login(request: Request, body: LoginRequest, auth: AuthSvc) -> TokenResponse:
    """Exchange DNI and PIN for an access/refresh token pair.

    Every attempt counts towards the per-address limit, successful or not.
    """
    return await auth.login(body.dni, body.pin)


@router.post("/refresh", response_model=TokenResponse, responses=_UNAUTHORIZED)
async def refresh(body: RefreshRequest, auth: AuthSvc) -> TokenResponse:
    """Mint a new token pair from a refresh token."""
    return auth.refresh(body.refresh_token)


@router.post(
    "/change-password",
    response_model=ChangePinResponse,
    dependencies=[Depends(audit_logged("change_pin"))],
    responses={**_UNAUTHORIZED, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def change_password(
    body: ChangePinRequest, current_user: CurrentUser, auth: AuthSvc
) -> ChangePinResponse:
    """Rotate the caller's PIN. Any ``new_pin`` sent is ignored."""
    return await auth.change_pin(current_user.id, body.old_pin)


@router.get(
    "/status",
    response_model=StatusResponse,
    dependencies=[Depends(get_current_user)],
    responses=_UNAUTHORIZED,
)
async def session_status() -> StatusResponse:
    """Report whether the presented access token is valid."""
    return StatusResponse(status="ok")


@router.get(
    "/me",
    response_model=UserResponse,
    responses={**_UNAUTHORIZED, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_current_user_info(current_user: CurrentUser, auth: AuthSvc) -> UserResponse:
    """Return the authenticated user's public profile."""
    return await auth.get_profile(current_user.id)
