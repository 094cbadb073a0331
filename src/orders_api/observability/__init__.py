"""
orders_api.observability

Structured logging configuration and request context propagation.
"""


# --- Module Notes -----------------------------------------------------------
# Request-scoped fields are bound in `observability.middleware`; caller identity in `auth.deps`.
