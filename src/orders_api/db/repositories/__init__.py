"""
orders_api.db.repositories

Thin data-access repositories; access decisions live in services.
"""

from __future__ import annotations

import uuid


def parse_id(value: str | uuid.UUID) -> uuid.UUID | None:
    # Ids arrive as opaque strings (path params, token claims); unparsable means "no such row".
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


# --- Module Notes -----------------------------------------------------------
# Repositories flush but never commit; the calling service owns the transaction.
