"""FastAPI dependencies for authentication."""

import logging
from typing import Annotated

from fastapi import Depends, Request

from banking.auth.tokens import TokenError, TokenType
from banking.dependencies import Issuer
from banking.errors import UnauthorizedError
from banking.schemas.auth import AuthenticatedUser

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def _extract_bearer_token(request: Request) -> str:
    """Pull the token out of ``Authorization: Bearer <token>``.

    Fails before any token parsing when the header is absent or lacks the
    prefix.
    """
    header = request.headers.get("Authorization")
    if not header:
        raise UnauthorizedError("Authorization header required")
    if not header.startswith(BEARER_PREFIX):
        raise UnauthorizedError("Invalid token format")
    token = header[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthorizedError("Invalid token format")
    return token


async def get_current_user(request: Request, issuer: Issuer) -> AuthenticatedUser:
    """Gate for protected routes: validate the access token and return its identity.

    Signature and expiry failures are reported identically so callers
    cannot tell which check failed. Refresh tokens are rejected.
    """
    token = _extract_bearer_token(request)
    try:
        claims = issuer.validate(token, expected_type=TokenType.ACCESS)
    except TokenError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        raise UnauthorizedError("Invalid or expired token") from exc

    return AuthenticatedUser(id=claims.user_id, token_expires_at=claims.expires_at)


# Convenience type alias
CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]

