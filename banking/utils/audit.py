"""Audit logging for credential and money-moving actions."""

import logging

from fastapi import Request

from banking.auth.dependencies import CurrentUser

logger = logging.getLogger("audit")


def client_address(request: Request) -> str:
    """Raw peer address of the connection (proxy headers are not trusted)."""
    return request.client.host if request.client else "unknown"


def audit_logged(action: str):
    """Dependency factory that logs privileged actions.

    PINs and tokens are never part of the record.

    Usage::

        @router.post("/deposit", dependencies=[Depends(audit_logged("deposit"))])
    """

    async def _log(request: Request, current_user: CurrentUser) -> None:
        request_id = getattr(request.state, "request_id", "n/a")
        logger.info(
            "AUDIT action=%s user=%s ip=%s request_id=%s path=%s",
            action,
            current_user.id,
            client_address(request),
            request_id,
            request.url.path,
        )

    return _log
