"""Domain error taxonomy.

Every error raised by services carries the HTTP status it maps to. The
exception handlers registered in ``banking.main`` render them as
``{"error": <message>}``; messages of 5xx errors are replaced by a generic
one so storage or upstream details never reach the client.
"""

from fastapi import status


class BankingError(Exception):
    """Base class for all expected failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def public_message(self) -> str:
        if self.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            return self.default_message
        return self.message


class ValidationError(BankingError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request body"


class UnauthorizedError(BankingError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidCredentialsError(UnauthorizedError):
    """Unknown DNI and wrong PIN are deliberately indistinguishable."""

    default_message = "Invalid DNI or PIN"


class ForbiddenError(BankingError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(BankingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(BankingError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class TooManyRequestsError(BankingError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_message = "Too many requests"


class UpstreamServiceError(BankingError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Upstream service unavailable"
