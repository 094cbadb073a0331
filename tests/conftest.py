"""
Shared fixtures: an app bound to a throwaway SQLite file and an in-process HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from orders_api.api.app import create_app
from orders_api.auth.deps import jwt_config
from orders_api.auth.jwt import TokenVerifier
from orders_api.settings import Settings

TEST_SECRET = "test-secret-0123456789-abcdefghijklmnop"
PASSWORD = "12345"


@dataclass(frozen=True)
class Account:
    id: str
    email: str
    token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}",
        jwt_secret=TEST_SECRET,
        log_level="WARNING",
    )


@pytest.fixture
def verifier(settings: Settings) -> TokenVerifier:
    return TokenVerifier(jwt_config(settings))


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run lifespan events; drive them explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def _signup(client: httpx.AsyncClient, *, name: str, role: str = "User") -> Account:
    email = f"{name.lower()}@test.com"
    r = await client.post(
        "/register",
        json={"name": name, "role": role, "email": email, "password": PASSWORD, "address": "Somewhere 10"},
    )
    assert r.status_code == 201, r.text
    r = await client.post("/login", json={"email": email, "password": PASSWORD})
    assert r.status_code == 200, r.text
    body = r.json()
    return Account(id=body["user"]["id"], email=email, token=body["accessToken"])


@pytest_asyncio.fixture
async def admin(client: httpx.AsyncClient) -> Account:
    return await _signup(client, name="Admin", role="Admin")


@pytest_asyncio.fixture
async def alice(client: httpx.AsyncClient) -> Account:
    return await _signup(client, name="Alice")


@pytest_asyncio.fixture
async def bob(client: httpx.AsyncClient) -> Account:
    return await _signup(client, name="Bob")


@pytest.fixture
def signup(client: httpx.AsyncClient):
    async def _create(name: str, role: str = "User") -> Account:
        return await _signup(client, name=name, role=role)

    return _create


# --- Module Notes -----------------------------------------------------------
# Each test gets its own SQLite file under tmp_path, so no cleanup is needed.
