"""
orders_api.api

API package: FastAPI app factory, routers and request-scoped dependencies.
"""


# --- Module Notes -----------------------------------------------------------
# Routers stay thin: validation + auth dependencies + a single service call.
