"""
orders_api.auth.models

Auth domain models.

Responsibilities:
- Define the role enum shared by persistence and policy.
- Define the authenticated identity type (`Principal`) injected into endpoints.
- Define the `IdentityStore` boundary the gate reads through.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol


class Role(enum.StrEnum):
    # Values are stored in the DB and accepted by /register; treat as stable API contract.
    user = "User"
    admin = "Admin"


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity.

    Built by the authentication gate for a single request and never persisted.
    """

    id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.admin


@dataclass(frozen=True, slots=True)
class IdentityClaim:
    # What a verified token asserts; the role is never taken from the token.
    identity_id: str


class IdentityRecord(Protocol):
    # Only the role is read; the id comes from the verified claim.
    role: Role | None


class IdentityStore(Protocol):
    async def find_by_id(self, identity_id: str) -> IdentityRecord | None: ...


def parse_role(value: Role | str | None) -> Role | None:
    # None for an empty or unknown stored role; callers treat that as corrupted data.
    if not value:
        return None
    try:
        return Role(value)
    except ValueError:
        return None


# --- Module Notes -----------------------------------------------------------
# `Role` values double as the stored `users.role` strings and the /register payload.
