"""
orders_api.auth

Authentication/authorization package.

Responsibilities:
- JWT issuing and verification.
- The authentication gate (bearer token -> verified `Principal`).
- The owner-or-admin authorization policy.
- FastAPI dependencies wiring the above into routers.
"""


# --- Module Notes -----------------------------------------------------------
# Dependency direction: routers -> auth.deps -> gate/policy -> models; the gate and
# policy never import FastAPI routing or the DB layer.
