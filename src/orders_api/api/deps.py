"""
orders_api.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide the settings the app was built with.
- Encapsulate app.state access patterns (engine/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from orders_api.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Set by `orders_api.api.app.create_app`; lets tests build apps with their own settings.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit/rollback is managed explicitly by the service layer.
    async with session_factory() as session:
        yield session


# --- Module Notes -----------------------------------------------------------
# `db_session` is shared by the auth gate and the route through FastAPI's dependency cache.
