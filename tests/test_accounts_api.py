"""
Registration, login and user management, plus the integrity-fault path through the app.
"""

from __future__ import annotations

import asyncio
import uuid

import httpx
import pytest
from sqlalchemy import update

from orders_api.api.app import create_app
from orders_api.db.models import User


@pytest.mark.asyncio
async def test_register_and_login(client: httpx.AsyncClient) -> None:
    r = await client.post(
        "/register",
        json={"name": "Carol", "email": "Carol@Test.com", "password": "pw", "address": "Here 1"},
    )
    assert r.status_code == 201
    created = r.json()
    assert created["role"] == "User"
    assert created["email"] == "carol@test.com"
    assert "password" not in created and "password_hash" not in created

    r = await client.post("/login", json={"email": "carol@test.com", "password": "pw"})
    assert r.status_code == 200
    body = r.json()
    assert body["user"]["id"] == created["id"]
    assert body["tokenType"] == "bearer"

    r = await client.get("/users/me", headers={"Authorization": f"Bearer {body['accessToken']}"})
    assert r.status_code == 200
    assert r.json()["name"] == "Carol"


@pytest.mark.asyncio
async def test_duplicate_email_is_409(client: httpx.AsyncClient, alice) -> None:
    r = await client.post("/register", json={"name": "Again", "email": alice.email, "password": "pw"})
    assert r.status_code == 409


@pytest.mark.asyncio
async def test_register_with_unknown_role_is_400(client: httpx.AsyncClient) -> None:
    r = await client.post(
        "/register", json={"name": "X", "email": "x@test.com", "password": "pw", "role": "Root"}
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_login_with_wrong_password_is_401(client: httpx.AsyncClient, alice) -> None:
    r = await client.post("/login", json={"email": alice.email, "password": "nope"})
    assert r.status_code == 401
    r = await client.post("/login", json={"email": "nobody@test.com", "password": "nope"})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_user_profile_is_owner_or_admin(client: httpx.AsyncClient, admin, alice, bob) -> None:
    r = await client.get(f"/user/{alice.id}", headers=alice.headers)
    assert r.status_code == 200
    r = await client.get(f"/user/{bob.id}", headers=alice.headers)
    assert r.status_code == 403
    r = await client.get(f"/user/{bob.id}", headers=admin.headers)
    assert r.status_code == 200
    r = await client.get(f"/user/{uuid.uuid4()}", headers=admin.headers)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_user_management_is_admin_only(client: httpx.AsyncClient, admin, alice, bob) -> None:
    r = await client.get("/users/all", headers=alice.headers)
    assert r.status_code == 403
    r = await client.delete(f"/user/{bob.id}", headers=alice.headers)
    assert r.status_code == 403

    r = await client.get("/users/all", headers=admin.headers)
    assert r.status_code == 200
    assert {u["id"] for u in r.json()} == {admin.id, alice.id, bob.id}

    r = await client.delete(f"/user/{uuid.uuid4()}", headers=admin.headers)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_admin_signup_can_be_disabled(settings) -> None:
    app = create_app(settings=settings.model_copy(update={"allow_admin_signup": False}))
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.post(
                "/register",
                json={"name": "Root", "email": "root@test.com", "password": "pw", "role": "Admin"},
            )
            assert r.status_code == 403

            r = await client.post(
                "/register", json={"name": "Plain", "email": "plain@test.com", "password": "pw"}
            )
            assert r.status_code == 201


@pytest.mark.asyncio
async def test_identity_without_role_fails_closed(client: httpx.AsyncClient, app, alice) -> None:
    async with app.state.sessionmaker() as session:
        await session.execute(update(User).where(User.id == uuid.UUID(alice.id)).values(role=""))
        await session.commit()

    r = await client.get("/orders/all", headers=alice.headers)
    assert r.status_code == 500
    assert r.json() == {"detail": "Internal server error"}


@pytest.mark.asyncio
async def test_concurrent_duplicate_registrations_conflict(client: httpx.AsyncClient) -> None:
    body = {"name": "Racer", "email": "racer@test.com", "password": "pw"}
    responses = await asyncio.gather(*(client.post("/register", json=body) for _ in range(4)))

    assert sorted(r.status_code for r in responses) == [201, 409, 409, 409]
    assert all(r.json()["detail"] == "Email already registered." for r in responses if r.status_code == 409)

    r = await client.post("/login", json={"email": "racer@test.com", "password": "pw"})
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_listing_users_with_corrupted_role_fails_closed(
    client: httpx.AsyncClient, app, admin, bob
) -> None:
    async with app.state.sessionmaker() as session:
        await session.execute(update(User).where(User.id == uuid.UUID(bob.id)).values(role="Superuser"))
        await session.commit()

    r = await client.get("/users/all", headers=admin.headers)
    assert r.status_code == 500
    assert r.json() == {"detail": "Internal server error"}

    r = await client.get(f"/user/{bob.id}", headers=admin.headers)
    assert r.status_code == 500

    # Healthy records are unaffected.
    r = await client.get(f"/user/{admin.id}", headers=admin.headers)
    assert r.status_code == 200


# --- Module Notes -----------------------------------------------------------
# Role corruption is written straight through the app's sessionmaker, bypassing
# the API, since no endpoint can store an invalid role.
