"""
orders_api.services.accounts

Account lifecycle: registration, login and admin-driven deletion.

Deleting a user also deletes the orders it owns; tokens issued to it stop
working on the next request because the gate re-reads the identity store.
"""

from __future__ import annotations

from datetime import timedelta

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_409_CONFLICT

from orders_api.auth.errors import Forbidden, NotFound
from orders_api.auth.jwt import TokenVerifier
from orders_api.auth.models import Principal, Role
from orders_api.auth.passwords import check_password, hash_password
from orders_api.auth.policy import AccessTier, enforce
from orders_api.db.models import User
from orders_api.db.repositories.orders import OrderRepo
from orders_api.db.repositories.users import UserRepo
from orders_api.observability.logging import get_logger
from orders_api.settings import Settings

log = get_logger(__name__)


class AccountService:
    def __init__(self, *, session: AsyncSession, settings: Settings) -> None:
        self._session = session
        self._settings = settings
        self._users = UserRepo(session)
        self._orders = OrderRepo(session)

    async def register(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: Role,
        address: str,
    ) -> User:
        if role == Role.admin and not self._settings.allow_admin_signup:
            raise Forbidden("Admin accounts cannot be self-registered.")
        email = email.strip().lower()
        if await self._users.find_by_email(email) is not None:
            raise _email_taken()

        try:
            user = await self._users.create(
                name=name,
                email=email,
                password_hash=hash_password(password),
                role=role,
                address=address,
            )
            await self._session.commit()
        except IntegrityError as e:
            # A concurrent registration won the unique(email) race after our lookup.
            await self._session.rollback()
            log.info("register_conflict", reason="email_taken")
            raise _email_taken() from e
        log.info("user_registered", new_user_id=str(user.id), new_user_role=role.value)
        return user

    async def login(self, *, email: str, password: str, verifier: TokenVerifier) -> tuple[str, User]:
        user = await self._users.find_by_email(email.strip().lower())
        matches, upgraded_hash = check_password(password, user.password_hash) if user else (False, None)
        if user is None or not matches:
            log.info("login_failed")
            raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid email or password.")
        if upgraded_hash is not None:
            user.password_hash = upgraded_hash
            await self._session.commit()
            log.info("password_hash_upgraded", login_user_id=str(user.id))

        token = verifier.issue(
            subject=str(user.id),
            ttl=timedelta(minutes=self._settings.jwt_ttl_minutes),
        )
        log.info("login_succeeded", login_user_id=str(user.id))
        return token, user

    async def get(self, principal: Principal, user_id: str) -> User:
        user = await self._users.find_by_id(user_id)
        if user is None:
            raise NotFound("No user found.")
        enforce(principal, str(user.id))
        return user

    async def list_all(self, principal: Principal) -> list[User]:
        enforce(principal, None, AccessTier.admin)
        return await self._users.list_all()

    async def delete(self, principal: Principal, user_id: str) -> User:
        enforce(principal, None, AccessTier.admin)
        user = await self._users.find_by_id(user_id)
        if user is None:
            raise NotFound("No user found.")

        removed_orders = await self._orders.delete_for_owner(user.id)
        await self._users.delete(user.id)
        await self._session.commit()
        log.info("user_deleted", deleted_user_id=str(user.id), removed_orders=removed_orders)
        return user


def _email_taken() -> HTTPException:
    return HTTPException(status_code=HTTP_409_CONFLICT, detail="Email already registered.")


# --- Module Notes -----------------------------------------------------------
# Registration and login are public; every other operation here runs behind the
# auth gate and applies the owner-or-admin policy itself.
