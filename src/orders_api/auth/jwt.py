"""
orders_api.auth.jwt

JWT issuing and verification.

Responsibilities:
- Issue access tokens at login time.
- Verify bearer tokens (signature, expiry, registered claims) and extract the
  identity claim, classifying every failure into one of three kinds.

The verifier is pure: it never touches the identity store, and its signing
material is passed in through `JwtConfig` rather than read from settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from fastapi.security.utils import get_authorization_scheme_param

from orders_api.auth.models import IdentityClaim


@dataclass(frozen=True, slots=True)
class JwtConfig:
    # Algorithm/issuer/audience are enforced during decoding.
    alg: str
    issuer: str
    audience: str
    secret: str


class CredentialError(Exception):
    kind = "invalid"


class MalformedCredential(CredentialError):
    kind = "malformed"


class InvalidSignature(CredentialError):
    kind = "invalid_signature"


class ExpiredCredential(CredentialError):
    kind = "expired"


def extract_bearer(authorization: str | None) -> str | None:
    """
    Pull the token out of an `Authorization` header value.

    Returns None when there is nothing to verify (header absent, empty, or a bare
    scheme). Raises `MalformedCredential` when a credential is present under a
    scheme other than Bearer.
    """

    if not authorization or not authorization.strip():
        return None
    scheme, token = get_authorization_scheme_param(authorization.strip())
    if not token:
        return None
    if scheme.lower() != "bearer":
        raise MalformedCredential(f"unsupported authorization scheme: {scheme}")
    return token


class TokenVerifier:
    def __init__(self, cfg: JwtConfig) -> None:
        self._cfg = cfg

    def issue(self, *, subject: str, ttl: timedelta, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(tz=UTC)
        # Keep payload minimal: the role is re-read from the identity store on every request.
        payload: dict[str, Any] = {
            "iss": self._cfg.issuer,
            "aud": self._cfg.audience,
            "sub": subject,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + ttl).timestamp()),
        }
        return jwt.encode(payload, self._cfg.secret, algorithm=self._cfg.alg)

    def verify(self, token: str) -> IdentityClaim:
        if not token:
            raise MalformedCredential("empty token")
        try:
            payload = jwt.decode(
                token,
                self._cfg.secret,
                algorithms=[self._cfg.alg],
                issuer=self._cfg.issuer,
                audience=self._cfg.audience,
                options={"require": ["exp", "iat", "iss", "aud", "sub"]},
            )
        # InvalidSignatureError subclasses DecodeError, so it must be matched first.
        except jwt.InvalidSignatureError as e:
            raise InvalidSignature(str(e)) from e
        except jwt.ExpiredSignatureError as e:
            raise ExpiredCredential(str(e)) from e
        except jwt.InvalidTokenError as e:
            raise MalformedCredential(str(e)) from e

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            raise MalformedCredential("token subject is missing")
        return IdentityClaim(identity_id=subject)


# --- Module Notes -----------------------------------------------------------
# Expired tokens currently map to 403 like any other verifier failure; the
# `kind` attribute keeps them distinguishable if that mapping changes.
