"""Shared test fixtures for the banking backend."""

import os

# Configure settings before any app import triggers Settings() validation.
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-for-unit-tests-0123456789abcdef")
os.environ.setdefault("API_RATE_LIMIT", "10000/minute")
os.environ.setdefault("LOG_FORMAT", "console")

from collections.abc import AsyncGenerator  # noqa: E402
from decimal import Decimal  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from banking.auth.tokens import TokenIssuer  # noqa: E402
from banking.config import get_settings  # noqa: E402
from banking.main import app  # noqa: E402
from banking.rate_limit import limiter  # noqa: E402
from banking.providers import (  # noqa: E402
    get_account_repository,
    get_transaction_repository,
    get_user_repository,
)
from tests.helpers.fakes import (  # noqa: E402
    InMemoryAccountRepository,
    InMemoryTransactionRepository,
    InMemoryUserRepository,
    StubExchangeRateClient,
)

# ---------------------------------------------------------------------------
# Mock DB session (only the readiness probe touches it)
# ---------------------------------------------------------------------------


def _make_mock_session_factory():
    """Return a callable that mimics ``async_sessionmaker().__call__()``."""
    session = AsyncMock()
    result_mock = MagicMock()
    result_mock.scalar.return_value = 1
    session.execute.return_value = result_mock
    factory = MagicMock()
    ctx = AsyncMock()
    ctx.__aenter__.return_value = session
    factory.return_value = ctx
    return factory, session


# ---------------------------------------------------------------------------
# In-memory collaborators
# ---------------------------------------------------------------------------


@pytest.fixture()
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def account_repo() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture()
def transaction_repo() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture()
def exchange_rates() -> StubExchangeRateClient:
    return StubExchangeRateClient(
        {
            ("EUR", "USD"): Decimal("1.10"),
            ("USD", "EUR"): Decimal("0.90"),
        }
    )


@pytest.fixture()
def issuer() -> TokenIssuer:
    return TokenIssuer.from_settings(get_settings())


# ---------------------------------------------------------------------------
# HTTP client fixture (FastAPI app with in-memory infra)
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def client(
    user_repo, account_repo, transaction_repo, exchange_rates, issuer
) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the FastAPI app.

    Repositories are in-memory and the slowapi counters are cleared for
    every test, so no state leaks between tests.
    """
    session_factory, _ = _make_mock_session_factory()
    app.state.engine = MagicMock()
    app.state.session_factory = session_factory
    app.state.exchange_rates = exchange_rates
    app.state.token_issuer = issuer
    limiter.reset()

    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_account_repository] = lambda: account_repo
    app.dependency_overrides[get_transaction_repository] = lambda: transaction_repo

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
