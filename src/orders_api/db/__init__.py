"""
orders_api.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, and repositories.
"""


# --- Module Notes -----------------------------------------------------------
# Only services use repositories; routers never touch the session directly.
