"""Signed, time-bound access and refresh tokens.

Tokens are HS256 JWTs signed with a single process-wide secret read once
from settings at startup. Every token carries::

    sub   user id
    type  "access" | "refresh"
    iat   issued-at (unix seconds)
    exp   expiry (unix seconds)
    jti   random id, keeps tokens minted in the same second distinct

The ``type`` claim stops a refresh token from being replayed as an access
token and vice versa. There is no revocation list: a token stays valid
until ``exp``. Expiry is checked against an injectable clock rather than
python-jose's wall clock so it can be exercised in tests.
"""

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import StrEnum
from typing import Any

from jose import JWTError, jwt

from banking.config import Settings

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


class TokenType(StrEnum):
    """Discriminant stored in the ``type`` claim."""

    ACCESS = "access"
    REFRESH = "refresh"


class TokenError(Exception):
    """Base class for token validation failures."""


class InvalidTokenError(TokenError):
    """Bad signature, malformed token, missing claims or wrong token type."""


class ExpiredTokenError(TokenError):
    """Signature is valid but ``exp`` has passed."""


@dataclass(frozen=True)
class Claims:
    """Verified token payload."""

    user_id: str
    expires_at: datetime
    token_type: TokenType


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str
    expires_in: int  # access token lifetime in seconds


class TokenIssuer:
    """Issues and validates signed tokens for a user id."""

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        access_ttl: timedelta = timedelta(minutes=15),
        refresh_ttl: timedelta = timedelta(days=7),
        clock: Clock = utcnow,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, clock: Clock = utcnow) -> "TokenIssuer":
        return cls(
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            access_ttl=timedelta(minutes=settings.jwt_access_token_expire_minutes),
            refresh_ttl=timedelta(minutes=settings.jwt_refresh_token_expire_minutes),
            clock=clock,
        )

    @property
    def access_ttl(self) -> timedelta:
        return self._access_ttl

    @property
    def refresh_ttl(self) -> timedelta:
        return self._refresh_ttl

    def _issue(self, user_id: str, token_type: TokenType, ttl: timedelta) -> str:
        now = self._clock()
        payload: dict[str, Any] = {
            "sub": user_id,
            "type": token_type.value,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def issue_access_token(self, user_id: str) -> str:
        """Create a short-lived token for authenticating API calls."""
        return self._issue(user_id, TokenType.ACCESS, self._access_ttl)

    def issue_refresh_token(self, user_id: str) -> str:
        """Create a long-lived token usable only to mint a new pair."""
        return self._issue(user_id, TokenType.REFRESH, self._refresh_ttl)

    def issue_pair(self, user_id: str) -> TokenPair:
        return TokenPair(
            access_token=self.issue_access_token(user_id),
            refresh_token=self.issue_refresh_token(user_id),
            expires_in=int(self._access_ttl.total_seconds()),
        )

    def validate(self, token: str, expected_type: TokenType | None = None) -> Claims:
        """Verify signature, claims and expiry of *token*.

        Raises:
            InvalidTokenError: Signature/format is wrong, a required claim is
                missing, or the token type differs from *expected_type*.
            ExpiredTokenError: The token is past its ``exp``.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise InvalidTokenError("Token signature or format is invalid") from exc

        user_id = payload.get("sub")
        exp = payload.get("exp")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError("Token has no subject")
        if not isinstance(exp, int | float):
            raise InvalidTokenError("Token has no expiry")
        try:
            token_type = TokenType(payload.get("type"))
        except ValueError as exc:
            raise InvalidTokenError("Token has an unknown type") from exc

        expires_at = datetime.fromtimestamp(exp, tz=UTC)
        if self._clock() >= expires_at:
            raise ExpiredTokenError("Token has expired")
        if expected_type is not None and token_type is not expected_type:
            raise InvalidTokenError(f"Expected a {expected_type.value} token")

        return Claims(user_id=user_id, expires_at=expires_at, token_type=token_type)
