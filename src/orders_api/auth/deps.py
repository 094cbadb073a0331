"""
orders_api.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Run the authentication gate for every protected route and expose the `Principal`.
- Provide the admin-only guard used by collection endpoints.
"""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.api.deps import db_session, settings_dep
from orders_api.auth.gate import AuthenticationGate
from orders_api.auth.jwt import JwtConfig, TokenVerifier
from orders_api.auth.models import Principal
from orders_api.auth.policy import AccessTier, enforce
from orders_api.db.repositories.users import UserRepo
from orders_api.observability.logging import bind_principal
from orders_api.settings import Settings


def jwt_config(settings: Settings) -> JwtConfig:
    return JwtConfig(
        alg=settings.jwt_alg,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        secret=settings.jwt_secret,
    )


def get_verifier(settings: Settings = Depends(settings_dep)) -> TokenVerifier:
    return TokenVerifier(jwt_config(settings))


async def get_principal(
    request: Request,
    verifier: TokenVerifier = Depends(get_verifier),
    session: AsyncSession = Depends(db_session),
) -> Principal:
    gate = AuthenticationGate(verifier=verifier, identities=UserRepo(session))
    principal = await gate.authenticate(request.headers.get("authorization"))
    bind_principal(user_id=principal.id, role=principal.role.value)
    return principal


def require_admin(principal: Principal = Depends(get_principal)) -> Principal:
    enforce(principal, None, AccessTier.admin)
    return principal


# --- Module Notes -----------------------------------------------------------
# Routes that only need an admin depend on `require_admin`; owner checks happen
# in the service layer where the resource owner is known.
