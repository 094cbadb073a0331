"""
orders_api.db.init_db

Schema bootstrap for the `users` and `orders` tables.

Responsibilities:
- Create missing tables when the app starts in dev/test.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from orders_api.db.models import Base


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# --- Module Notes -----------------------------------------------------------
# Tables are declared in `db.models`; importing `Base` from there registers them.
