"""
orders_api.auth.gate

Authentication gate: bearer credential -> verified `Principal`.

Order of checks is fixed:
1. credential present            (else NoCredential, 401)
2. token verifies                (else InvalidCredential, 403)
3. identity still exists         (else UnknownIdentity, 403)
4. identity record has a role    (else IntegrityFault)

The identity store is only consulted once the token has verified, so a forged
or expired token never reaches the database. Deleting a user therefore revokes
every token issued to it, even unexpired ones.
"""

from __future__ import annotations

from orders_api.auth.errors import IntegrityFault, InvalidCredential, NoCredential, UnknownIdentity
from orders_api.auth.jwt import CredentialError, TokenVerifier, extract_bearer
from orders_api.auth.models import IdentityStore, Principal, parse_role
from orders_api.observability.logging import get_logger

log = get_logger(__name__)


class AuthenticationGate:
    def __init__(self, *, verifier: TokenVerifier, identities: IdentityStore) -> None:
        self._verifier = verifier
        self._identities = identities

    async def authenticate(self, authorization: str | None) -> Principal:
        try:
            token = extract_bearer(authorization)
            if token is None:
                log.info("auth_missing_credential")
                raise NoCredential()
            claim = self._verifier.verify(token)
        except CredentialError as e:
            # Malformed, bad signature and expired all collapse into one 403 for the caller.
            log.info("auth_invalid_credential", reason=e.kind, error=str(e))
            raise InvalidCredential(e.kind) from e

        record = await self._identities.find_by_id(claim.identity_id)
        if record is None:
            log.info("auth_unknown_identity", identity_id=claim.identity_id)
            raise UnknownIdentity()

        role = parse_role(record.role)
        if role is None:
            log.error("auth_integrity_fault", identity_id=claim.identity_id, role=record.role)
            raise IntegrityFault("identity record has no valid role", identity_id=claim.identity_id)

        log.debug("auth_succeeded", identity_id=claim.identity_id, role=role.value)
        return Principal(id=claim.identity_id, role=role)



# --- Module Notes -----------------------------------------------------------
# `auth.deps.get_principal` builds one gate per request around the request's DB session.
