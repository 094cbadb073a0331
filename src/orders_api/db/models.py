"""
orders_api.db.models

Persistence schema.

Responsibilities:
- User: identity record (role + password hash + profile fields).
- Order: purchase record owned by exactly one user.
"""

from __future__ import annotations

import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import Enum, ForeignKey, Index, String, Text, Uuid as SAUuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    # Naive UTC timestamps keep SQLite and Postgres behavior identical.
    return datetime.now(tz=UTC).replace(tzinfo=None)


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    # Store enum values ("Box1"), not member names.
    return [m.value for m in enum_cls]


class OrderType(enum.StrEnum):
    box1 = "Box1"
    box2 = "Box2"


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    # Plain string so a corrupted value reaches the auth gate as data (integrity fault)
    # instead of failing inside enum decoding.
    role: Mapped[str] = mapped_column(String(32), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)


class Order(Base):
    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    # Owner; set once at creation and never updated.
    user_id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    type: Mapped[OrderType] = mapped_column(
        Enum(OrderType, values_callable=_enum_values, native_enum=False),
        nullable=False,
        default=OrderType.box1,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (Index("ix_orders_user_created", "user_id", "created_at"),)


# --- Module Notes -----------------------------------------------------------
# `users.role` is a plain string column; see `auth.models.parse_role` for how bad values are handled.
