"""
orders_api.db.session

Engine and session factory for the orders database.

Responsibilities:
- Build the async engine from `Settings.database_url` (aiosqlite in dev/test).
- Build the sessionmaker that `api.deps.db_session` opens once per request.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from orders_api.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    # pool_pre_ping helps detect stale connections in long-lived processes.
    return create_async_engine(settings.database_url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False keeps ORM objects readable after commit (no async lazy loads).
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


# --- Module Notes -----------------------------------------------------------
# SQLite serializes writers; concurrent inserts wait on the driver's default lock timeout.
