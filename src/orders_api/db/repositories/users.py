"""
orders_api.db.repositories.users

Repository for `User` entities. Also serves as the identity store read by the
authentication gate (`find_by_id`).
"""

from __future__ import annotations

import uuid

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.auth.models import Role
from orders_api.db.models import User
from orders_api.db.repositories import parse_id


class UserRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
        address: str = "",
    ) -> User:
        user = User(
            name=name,
            email=email,
            password_hash=password_hash,
            role=role.value,
            address=address,
        )
        self._session.add(user)
        await self._session.flush()
        return user

    async def find_by_id(self, user_id: str | uuid.UUID) -> User | None:
        pk = parse_id(user_id)
        if pk is None:
            return None
        return await self._session.get(User, pk)

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def exists(self, user_id: str | uuid.UUID) -> bool:
        pk = parse_id(user_id)
        if pk is None:
            return False
        stmt = select(exists().where(User.id == pk))
        return bool((await self._session.execute(stmt)).scalar())

    async def list_all(self) -> list[User]:
        stmt = select(User).order_by(User.created_at)
        return list((await self._session.execute(stmt)).scalars().all())

    async def delete(self, user_id: uuid.UUID) -> None:
        await self._session.execute(delete(User).where(User.id == user_id))


# --- Module Notes -----------------------------------------------------------
# `find_by_id` satisfies `auth.models.IdentityStore`.
