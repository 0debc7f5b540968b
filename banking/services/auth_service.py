"""Service layer for signup, login, token refresh and PIN rotation."""

import asyncio
import logging

from banking.auth.pin_hasher import dummy_pin_hash, generate_pin, hash_pin, verify_pin
from banking.auth.tokens import TokenError, TokenIssuer, TokenPair, TokenType
from banking.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
)
from banking.repositories.protocols import UserRepositoryProtocol
from banking.repositories.user_repository import DuplicateUserError
from banking.schemas.auth import (
    ChangePinResponse,
    SignupResponse,
    TokenResponse,
    UserResponse,
)
from banking.validators.dni import mask

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("audit")


class AuthService:
    """Orchestrates credential issuance and session tokens.

    bcrypt is CPU bound, so hashing and verification run in a worker
    thread to keep the event loop responsive.
    """

    def __init__(self, repo: UserRepositoryProtocol, issuer: TokenIssuer):
        self._repo = repo
        self._issuer = issuer

    @staticmethod
    def _token_response(pair: TokenPair) -> TokenResponse:
        return TokenResponse(
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
            expires_in=pair.expires_in,
        )

    async def signup(self, dni: str, full_name: str, email: str) -> SignupResponse:
        """Register a user and hand back their generated PIN.

        The plaintext PIN exists only in the returned response; delivering it
        to the customer is the caller's responsibility.

        Raises:
            ConflictError: If the DNI is already registered.
        """
        if await self._repo.get_by_dni(dni) is not None:
            raise ConflictError("A user with this DNI already exists")

        pin = generate_pin()
        pin_hash = await asyncio.to_thread(hash_pin, pin)
        try:
            user = await self._repo.create(
                dni=dni, pin_hash=pin_hash, full_name=full_name, email=email
            )
        except DuplicateUserError as exc:
            # Lost a race with a concurrent signup for the same DNI
            raise ConflictError("A user with this DNI already exists") from exc

        audit_logger.info("AUDIT action=signup user=%s dni=%s", user.id, mask(dni))
        return SignupResponse(user_id=user.id, pin=pin)

    async def login(self, dni: str, pin: str) -> TokenResponse:
        """Exchange DNI + PIN for a token pair.

        Raises:
            InvalidCredentialsError: Unknown DNI or wrong PIN (indistinguishable).
        """
        user = await self._repo.get_by_dni(dni)
        if user is None:
            await asyncio.to_thread(verify_pin, pin, dummy_pin_hash())
            audit_logger.info("AUDIT action=login_failed dni=%s", mask(dni))
            raise InvalidCredentialsError()

        if not await asyncio.to_thread(verify_pin, pin, user.pin_hash):
            audit_logger.info("AUDIT action=login_failed dni=%s", mask(dni))
            raise InvalidCredentialsError()

        logger.info("User %s logged in", user.id)
        return self._token_response(self._issuer.issue_pair(user.id))

    def refresh(self, refresh_token: str) -> TokenResponse:
        """Mint a new pair from a valid refresh token.

        The presented token is not invalidated; it stays usable until it
        expires.

        Raises:
            UnauthorizedError: Invalid, expired or non-refresh token.
        """
        try:
            claims = self._issuer.validate(refresh_token, expected_type=TokenType.REFRESH)
        except TokenError as exc:
            raise UnauthorizedError("Invalid or expired token") from exc
        return self._token_response(self._issuer.issue_pair(claims.user_id))

    async def change_pin(self, user_id: str, old_pin: str) -> ChangePinResponse:
        """Verify the current PIN and replace it with a freshly generated one.

        Raises:
            NotFoundError: The user no longer exists.
            UnauthorizedError: *old_pin* does not match.
        """
        user = await self._repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        if not await asyncio.to_thread(verify_pin, old_pin, user.pin_hash):
            audit_logger.info("AUDIT action=change_pin_failed user=%s", user_id)
            raise UnauthorizedError("Invalid PIN")

        new_pin = generate_pin()
        new_hash = await asyncio.to_thread(hash_pin, new_pin)
        if await self._repo.update_pin_hash(user_id, new_hash) is None:
            raise NotFoundError("User not found")

        audit_logger.info("AUDIT action=change_pin user=%s", user_id)
        return ChangePinResponse(message="PIN changed successfully", new_pin=new_pin)

    async def get_profile(self, user_id: str) -> UserResponse:
        user = await self._repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)
