"""
orders_api.auth.errors

Error kinds produced by the authentication gate and authorization policy.

Client-facing kinds are `HTTPException` subclasses so FastAPI renders them with
the right status. `IntegrityFault` is not: it signals corrupted identity data
and is turned into a 500 by the app-level handler after being logged.
"""

from __future__ import annotations

from fastapi import HTTPException
from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
)


class AccessError(HTTPException):
    status_code: int = HTTP_403_FORBIDDEN
    default_detail: str = "Unauthorized access."

    def __init__(self, detail: str | None = None, headers: dict[str, str] | None = None) -> None:
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )


class NoCredential(AccessError):
    status_code = HTTP_401_UNAUTHORIZED
    default_detail = "Missing bearer token."

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredential(AccessError):
    def __init__(self, reason: str, detail: str | None = None) -> None:
        super().__init__(detail)
        # Which verifier failure triggered this (malformed / invalid_signature / expired).
        self.reason = reason


class UnknownIdentity(AccessError):
    pass


class Forbidden(AccessError):
    pass


class NotFound(AccessError):
    status_code = HTTP_404_NOT_FOUND
    default_detail = "Not found."


class IntegrityFault(Exception):
    """Persisted identity data violates an invariant (e.g. a user without a role)."""

    def __init__(self, message: str, *, identity_id: str) -> None:
        super().__init__(message)
        self.identity_id = identity_id


# --- Module Notes -----------------------------------------------------------
# Every status in the auth contract (401/403/404) comes from a class in this module;
# `IntegrityFault` becomes a 500 in `api.app`.
