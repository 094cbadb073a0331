"""
orders_api.services

Service layer: owns transactions and applies the authorization policy before
touching persistence.
"""


# --- Module Notes -----------------------------------------------------------
# Services raise the auth error kinds directly; FastAPI renders them.
