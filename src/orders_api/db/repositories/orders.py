"""
orders_api.db.repositories.orders

Repository for `Order` entities.
"""

from __future__ import annotations

import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.db.models import Order, OrderType
from orders_api.db.repositories import parse_id


class OrderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, user_id: uuid.UUID, type: OrderType, description: str) -> Order:
        order = Order(user_id=user_id, type=type, description=description)
        self._session.add(order)
        await self._session.flush()
        return order

    async def find_by_id(self, order_id: str | uuid.UUID) -> Order | None:
        pk = parse_id(order_id)
        if pk is None:
            return None
        return await self._session.get(Order, pk)

    async def list_for_owner(self, user_id: str | uuid.UUID) -> list[Order]:
        pk = parse_id(user_id)
        if pk is None:
            return []
        stmt = select(Order).where(Order.user_id == pk).order_by(Order.created_at)
        return list((await self._session.execute(stmt)).scalars().all())

    async def update(
        self,
        order: Order,
        *,
        type: OrderType | None = None,
        description: str | None = None,
    ) -> Order:
        # Owner (user_id) is immutable.
        if type is not None:
            order.type = type
        if description is not None:
            order.description = description
        await self._session.flush()
        return order

    async def delete(self, order: Order) -> None:
        await self._session.delete(order)
        await self._session.flush()

    async def delete_for_owner(self, user_id: uuid.UUID) -> int:
        result = await self._session.execute(delete(Order).where(Order.user_id == user_id))
        return result.rowcount or 0


# --- Module Notes -----------------------------------------------------------
# No method here changes `user_id` after creation.
