"""FastAPI application entry point."""

import logging
import uuid as _uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from structlog.contextvars import bound_contextvars

from banking import __version__
from banking.api.router import api_router
from banking.auth.tokens import TokenIssuer
from banking.clients.exchange_rates import ExchangeRateClient
from banking.config import DEFAULT_JWT_SECRET, get_settings
from banking.dependencies import create_engine, create_session_factory
from banking.errors import BankingError, TooManyRequestsError
from banking.rate_limit import limiter
from banking.utils.logging import setup_logging

logger = logging.getLogger(__name__)

SERVICE_NAME = "banking-backend"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager, owns all shared I/O resources."""
    settings = get_settings()
    # Startup
    logger.info("Starting Banking Backend...")
    logger.info("Environment: %s", settings.environment)
    if settings.jwt_secret_key == DEFAULT_JWT_SECRET:
        logger.warning("Using the built-in development JWT secret; set JWT_SECRET_KEY")

    try:
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
    except Exception:
        logger.exception("Failed to initialise database engine")
        raise

    app.state.exchange_rates = ExchangeRateClient.from_settings(settings)

    yield

    # Shutdown: release every resource even if one of them fails
    logger.info("Shutting down Banking Backend...")
    try:
        await app.state.exchange_rates.aclose()
    except Exception:
        logger.exception("Error closing exchange-rate client")
    finally:
        await engine.dispose()
    logger.info("Shutdown complete.")


# ---------------------------------------------------------------------------
# Request ID middleware, pure ASGI (no BaseHTTPMiddleware overhead)
# ---------------------------------------------------------------------------


class RequestIDMiddleware:
    """Inject a unique request ID into every request/response cycle."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        request_id = headers.get(b"x-request-id", b"").decode() or str(_uuid.uuid4())
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                response_headers = list(message.get("headers", []))
                response_headers.append((b"x-request-id", request_id.encode()))
                message["headers"] = response_headers
            await send(message)

        # Scoped bind: restored on exit, no stale context leaks
        with bound_contextvars(request_id=request_id):
            await self.app(scope, receive, send_with_request_id)


# ---------------------------------------------------------------------------
# Security headers middleware, pure ASGI
# ---------------------------------------------------------------------------

_SECURITY_HEADERS: list[tuple[bytes, bytes]] = [
    (b"x-content-type-options", b"nosniff"),
    (b"x-frame-options", b"DENY"),
    (b"referrer-policy", b"strict-origin-when-cross-origin"),
    (b"cache-control", b"no-store"),
    (b"content-security-policy", b"default-src 'none'; frame-ancestors 'none'"),
]


class SecurityHeadersMiddleware:
    """Add standard security headers to every response.

    ``no-store`` matters here: signup and change-password responses carry
    plaintext PINs.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_security_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                response_headers = list(message.get("headers", []))
                response_headers.extend(_SECURITY_HEADERS)
                if get_settings().is_production:
                    response_headers.append(
                        (b"strict-transport-security", b"max-age=63072000; includeSubDomains")
                    )
                message["headers"] = response_headers
            await send(message)

        await self.app(scope, receive, send_with_security_headers)


# ---------------------------------------------------------------------------
# Exception handlers: uniform {"error": ...} bodies, never leak internals
# ---------------------------------------------------------------------------


def _error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    if first.get("type") in ("json_invalid", "model_attributes_type", "dict_type"):
        return "Invalid request body"
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = str(first.get("msg", "invalid value")).removeprefix("Value error, ")
    return f"{'.'.join(loc)}: {message}" if loc else "Invalid request body"


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BankingError)
    async def _banking_error_handler(request: Request, exc: BankingError):
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc
            )
        return _error_response(exc.status_code, exc.public_message, exc.headers)

    # Synchronous: SlowAPIMiddleware calls this handler directly for default limits
    @app.exception_handler(RateLimitExceeded)
    def _rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(
            "Rate limit %s exceeded by %s on %s",
            exc.detail,
            get_remote_address(request),
            request.url.path,
        )
        error = TooManyRequestsError()
        return _error_response(error.status_code, error.public_message, error.headers)

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(request: Request, exc: RequestValidationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_application() -> FastAPI:
    """Application factory."""
    settings = get_settings()
    # Setup logging first
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title="Banking Backend API",
        description="PIN-based authentication, accounts and deposits with currency conversion.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Process-wide auth state, built once and injected through dependencies
    app.state.token_issuer = TokenIssuer.from_settings(settings)

    # Rate limiting: global defaults plus per-route limits such as /login
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    # Request ID and security headers (outermost = runs first)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    _register_exception_handlers(app)

    app.include_router(api_router)

    # ------------------------------------------------------------------
    # Service endpoints
    # ------------------------------------------------------------------

    @app.get("/", tags=["Health"])
    async def welcome() -> dict[str, str]:
        return {"message": "Welcome to the Banking System!"}

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Liveness check: is the process running?"""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": __version__,
        }

    @app.get("/ready", tags=["Health"])
    async def readiness_check(request: Request):
        """Readiness check: can the service reach its database?"""
        checks: dict[str, str] = {}
        try:
            async with request.app.state.session_factory() as session:
                await session.execute(text("SELECT 1"))
            checks["database"] = "ok"
        except Exception:
            logger.warning("Readiness probe: database unavailable", exc_info=True)
            checks["database"] = "unavailable"

        all_ok = all(v == "ok" for v in checks.values())
        payload = {
            "status": "ready" if all_ok else "degraded",
            "checks": checks,
        }
        if not all_ok:
            return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=payload)
        return payload

    return app


# Create the application instance
app = create_application()
