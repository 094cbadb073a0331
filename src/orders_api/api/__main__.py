"""
orders_api.api.__main__

Process entrypoint, used by both `python -m orders_api.api` and the
`orders-api` console script.

Responsibilities:
- Read settings from `ORDERS_*` environment variables.
- Build the app and serve it with uvicorn, leaving log output to structlog.
"""

from __future__ import annotations

import uvicorn

from orders_api.api.app import create_app
from orders_api.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings=settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# `log_config=None` stops uvicorn from installing its own handlers over structlog's.
