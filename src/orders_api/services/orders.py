"""
orders_api.services.orders

Order operations behind the owner-or-admin policy.

Every single-order operation resolves the order first and only then asks the
policy: a missing order is reported as 404 before any 403, for reads and
mutations alike.
"""

from __future__ import annotations

import time

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_400_BAD_REQUEST

from orders_api.auth.errors import NotFound
from orders_api.auth.models import Principal
from orders_api.auth.policy import AccessTier, enforce
from orders_api.db.models import Order, OrderType
from orders_api.db.repositories import parse_id
from orders_api.db.repositories.orders import OrderRepo
from orders_api.db.repositories.users import UserRepo
from orders_api.observability.logging import get_logger

log = get_logger(__name__)

SLOW_CREATE_THRESHOLD_MS = 500


class OrderService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._orders = OrderRepo(session)
        self._users = UserRepo(session)

    async def create(self, principal: Principal, *, type: OrderType, description: str) -> Order:
        started = time.perf_counter()
        # The owner is always the caller; there is no way to create on someone else's behalf.
        owner_id = parse_id(principal.id)
        if owner_id is None or not await self._users.exists(owner_id):
            log.info("order_create_rejected", reason="owner_missing")
            raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="No user associated with order.")

        order = await self._orders.create(user_id=owner_id, type=type, description=description)
        await self._session.commit()

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        log.info("order_created", order_id=str(order.id), duration_ms=duration_ms)
        if duration_ms > SLOW_CREATE_THRESHOLD_MS:
            log.warning("order_create_slow", duration_ms=duration_ms, threshold_ms=SLOW_CREATE_THRESHOLD_MS)
        return order

    async def list_owned(self, principal: Principal) -> list[Order]:
        return await self._orders.list_for_owner(principal.id)

    async def list_for_user(self, principal: Principal, user_id: str) -> list[Order]:
        enforce(principal, None, AccessTier.admin)
        return await self._orders.list_for_owner(user_id)

    async def get(self, principal: Principal, order_id: str) -> Order:
        return await self._load_authorized(principal, order_id)

    async def update(
        self,
        principal: Principal,
        order_id: str,
        *,
        type: OrderType | None = None,
        description: str | None = None,
    ) -> Order:
        order = await self._load_authorized(principal, order_id)
        order = await self._orders.update(order, type=type, description=description)
        await self._session.commit()
        log.info("order_updated", order_id=str(order.id))
        return order

    async def delete(self, principal: Principal, order_id: str) -> Order:
        order = await self._load_authorized(principal, order_id)
        await self._orders.delete(order)
        await self._session.commit()
        log.info("order_deleted", order_id=str(order.id), owner_id=str(order.user_id))
        return order

    async def _load_authorized(self, principal: Principal, order_id: str) -> Order:
        order = await self._orders.find_by_id(order_id)
        if order is None:
            raise NotFound("No order found.")
        enforce(principal, str(order.user_id))
        return order


# --- Module Notes -----------------------------------------------------------
# Order creation re-checks that the caller's user row still exists before inserting.
