"""
orders_api.auth.policy

Owner-or-admin authorization policy.

Rule: ALLOW when the principal is an Admin, or when it owns the resource.
Collection endpoints that span identities use the `admin` tier, where there is
no owner to compare against and only the Admin role is allowed.
"""

from __future__ import annotations

import enum

from orders_api.auth.errors import Forbidden
from orders_api.auth.models import Principal
from orders_api.observability.logging import get_logger

log = get_logger(__name__)


class Decision(enum.Enum):
    allow = "ALLOW"
    deny = "DENY"


class AccessTier(enum.Enum):
    owner_or_admin = "owner_or_admin"
    admin = "admin"


def authorize(
    principal: Principal,
    owner_id: str | None,
    tier: AccessTier = AccessTier.owner_or_admin,
) -> Decision:
    if principal.is_admin:
        return Decision.allow
    if tier is AccessTier.owner_or_admin and owner_id is not None and principal.id == owner_id:
        return Decision.allow
    return Decision.deny


def enforce(
    principal: Principal,
    owner_id: str | None,
    tier: AccessTier = AccessTier.owner_or_admin,
) -> None:
    """Raise `Forbidden` unless `authorize` allows the access."""

    if authorize(principal, owner_id, tier) is Decision.deny:
        log.info("access_denied", owner_id=owner_id, tier=tier.value)
        raise Forbidden()


# --- Module Notes -----------------------------------------------------------
# Callers look the resource up first and raise NotFound before calling `enforce`.
