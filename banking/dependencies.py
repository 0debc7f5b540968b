"""Dependency injection for FastAPI."""

import logging
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import QueuePool

from banking.auth.tokens import TokenIssuer
from banking.clients.exchange_rates import ExchangeRateClient
from banking.config import Settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Lifespan helpers, called from main.py to create & destroy shared resources
# ---------------------------------------------------------------------------


def _register_pool_events(engine: AsyncEngine) -> None:
    """Attach pool event listeners for observability."""
    pool = engine.pool
    if not isinstance(pool, QueuePool):
        return

    @event.listens_for(pool, "checkout")
    def _on_checkout(_dbapi_conn, _conn_record, _conn_proxy):
        logger.debug("Pool checkout size=%s checked_out=%s", pool.size(), pool.checkedout())

    @event.listens_for(pool, "overflow")
    def _on_overflow(_dbapi_conn):
        logger.warning("Pool overflow size=%s overflow=%s", pool.size(), pool.overflow())


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async database engine."""
    engine = create_async_engine(
        str(settings.database_url),
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
    )
    _register_pool_events(engine)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory bound to *engine*."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# ---------------------------------------------------------------------------
# FastAPI dependencies, pull resources from app.state
# ---------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides a database session from app.state.

    Owns the unit-of-work lifecycle: commits on success, rolls back on
    exception. Repositories call ``session.flush()`` (not
    ``session.commit()``) so that all writes within a single request
    are committed atomically.
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def get_token_issuer(request: Request) -> TokenIssuer:
    """The process-wide issuer built once by the application factory."""
    return request.app.state.token_issuer


def get_exchange_rate_client(request: Request) -> ExchangeRateClient:
    return request.app.state.exchange_rates


# ---------------------------------------------------------------------------
# Type aliases for cleaner dependency injection
# ---------------------------------------------------------------------------
DBSession = Annotated[AsyncSession, Depends(get_db_session)]
Issuer = Annotated[TokenIssuer, Depends(get_token_issuer)]
ExchangeRates = Annotated[ExchangeRateClient, Depends(get_exchange_rate_client)]
