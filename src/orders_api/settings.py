"""
orders_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API, auth and persistence layers.
- Hide the JWT signing secret from repr/logging.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ORDERS_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "orders-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "orders-api"
    jwt_audience: str = "orders-api"
    jwt_secret: str = Field(default="dev-secret-change-me-before-deploying", repr=False)
    jwt_ttl_minutes: int = Field(default=24 * 60, ge=1)

    # Accounts
    allow_admin_signup: bool = True

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./orders.db"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Routes read the instance stored on `app.state.settings`; `get_settings()` is
# only used by the process entrypoint.
