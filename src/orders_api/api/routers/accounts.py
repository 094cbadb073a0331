"""
orders_api.api.routers.accounts

Registration, login and user management endpoints.

Responsibilities:
- Public: `/register`, `/login`.
- Authenticated: own profile, single user (owner-or-admin).
- Admin-only: list all users, delete a user.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED

from orders_api.api.deps import db_session, settings_dep
from orders_api.auth.deps import get_principal, get_verifier, require_admin
from orders_api.auth.errors import IntegrityFault
from orders_api.auth.jwt import TokenVerifier
from orders_api.auth.models import Principal, Role, parse_role
from orders_api.db.models import User
from orders_api.observability.logging import get_logger
from orders_api.services.accounts import AccountService
from orders_api.settings import Settings

log = get_logger(__name__)

router = APIRouter(tags=["accounts"])


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=256)
    email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1, max_length=1024)
    role: Role = Role.user
    address: str = Field(default="", max_length=1024)


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserResponse(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    role: Role
    address: str

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        role = parse_role(user.role)
        if role is None:
            # Same fail-closed rule as the auth gate: a stored user must carry a valid role.
            log.error("user_integrity_fault", identity_id=str(user.id), role=user.role)
            raise IntegrityFault("user record has no valid role", identity_id=str(user.id))
        return cls(id=user.id, name=user.name, email=user.email, role=role, address=user.address)


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")
    token_type: str = Field(default="bearer", alias="tokenType")
    user: UserResponse


def _service(session: AsyncSession, settings: Settings) -> AccountService:
    return AccountService(session=session, settings=settings)


@router.post("/register", response_model=UserResponse, status_code=HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> UserResponse:
    user = await _service(session, settings).register(
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
        address=body.address,
    )
    return UserResponse.from_user(user)


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
    verifier: TokenVerifier = Depends(get_verifier),
) -> LoginResponse:
    token, user = await _service(session, settings).login(
        email=body.email, password=body.password, verifier=verifier
    )
    return LoginResponse(access_token=token, user=UserResponse.from_user(user))


@router.get("/users/me", response_model=UserResponse)
async def get_me(
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> UserResponse:
    return UserResponse.from_user(await _service(session, settings).get(principal, principal.id))


@router.get("/users/all", response_model=list[UserResponse])
async def list_users(
    principal: Principal = Depends(require_admin),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> list[UserResponse]:
    users = await _service(session, settings).list_all(principal)
    return [UserResponse.from_user(u) for u in users]


@router.get("/user/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> UserResponse:
    return UserResponse.from_user(await _service(session, settings).get(principal, user_id))


@router.delete("/user/{user_id}", response_model=UserResponse)
async def delete_user(
    user_id: str,
    principal: Principal = Depends(require_admin),
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> UserResponse:
    return UserResponse.from_user(await _service(session, settings).delete(principal, user_id))


# --- Module Notes -----------------------------------------------------------
# Response models never include `password_hash`.
