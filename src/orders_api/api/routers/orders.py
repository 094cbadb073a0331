"""
orders_api.api.routers.orders

Order endpoints. Every route runs behind the authentication gate; single-order
routes resolve the order (404) before applying the owner-or-admin policy (403).
"""

from __future__ import annotations

import uuid
from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED

from orders_api.api.deps import db_session
from orders_api.auth.deps import get_principal, require_admin
from orders_api.auth.models import Principal
from orders_api.db.models import Order, OrderType
from orders_api.services.orders import OrderService

router = APIRouter(tags=["orders"])


class OrderCreateRequest(BaseModel):
    # No owner field: the owner is always the authenticated caller.
    type: OrderType = OrderType.box1
    description: str = Field(default="", max_length=4096)


class OrderUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id", min_length=1)
    type: OrderType | None = None
    description: str | None = Field(default=None, max_length=4096)


class OrderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID = Field(alias="_id")
    user: uuid.UUID
    type: OrderType
    description: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> OrderResponse:
        return cls(
            id=order.id,
            user=order.user_id,
            type=order.type,
            description=order.description,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


@router.get("/orders/user/{user_id}", response_model=list[OrderResponse])
async def list_orders_for_user(
    user_id: str,
    principal: Principal = Depends(require_admin),
    session: AsyncSession = Depends(db_session),
) -> list[OrderResponse]:
    orders = await OrderService(session=session).list_for_user(principal, user_id)
    return [OrderResponse.from_order(o) for o in orders]


@router.get("/orders/all", response_model=list[OrderResponse])
async def list_my_orders(
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> list[OrderResponse]:
    orders = await OrderService(session=session).list_owned(principal)
    return [OrderResponse.from_order(o) for o in orders]


@router.get("/order/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> OrderResponse:
    return OrderResponse.from_order(await OrderService(session=session).get(principal, order_id))


@router.post("/order", response_model=OrderResponse, status_code=HTTP_201_CREATED)
async def create_order(
    body: OrderCreateRequest,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> OrderResponse:
    order = await OrderService(session=session).create(
        principal, type=body.type, description=body.description
    )
    return OrderResponse.from_order(order)


@router.put("/order", response_model=OrderResponse)
async def update_order(
    body: OrderUpdateRequest,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> OrderResponse:
    order = await OrderService(session=session).update(
        principal, body.id, type=body.type, description=body.description
    )
    return OrderResponse.from_order(order)


@router.delete("/order/{order_id}", response_model=OrderResponse)
async def delete_order(
    order_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
) -> OrderResponse:
    return OrderResponse.from_order(await OrderService(session=session).delete(principal, order_id))


# --- Module Notes -----------------------------------------------------------
# Orders serialize their id as `_id` and their owner as `user`, which existing clients depend on.
