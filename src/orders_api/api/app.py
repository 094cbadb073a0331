"""
orders_api.api.app

FastAPI app factory for the Orders API.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Map auth integrity faults and request validation errors to responses.
- Initialize and dispose the DB engine/session factory.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from orders_api import __version__
from orders_api.api.routers.accounts import router as accounts_router
from orders_api.api.routers.health import router as health_router
from orders_api.api.routers.orders import router as orders_router
from orders_api.auth.errors import IntegrityFault
from orders_api.db.init_db import init_db
from orders_api.db.session import create_engine, create_sessionmaker
from orders_api.observability.logging import configure_logging, get_logger
from orders_api.observability.middleware import RequestContextMiddleware
from orders_api.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod is expected to provision the schema out of band.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Orders API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(IntegrityFault, _integrity_fault_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(health_router, tags=["health"])
    app.include_router(accounts_router)
    app.include_router(orders_router)

    return app


async def _integrity_fault_handler(request: Request, exc: IntegrityFault) -> JSONResponse:
    # Corrupted identity data: fail closed and escalate, never treat as a client error.
    log.error(
        "integrity_fault",
        identity_id=exc.identity_id,
        error=str(exc),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": "Bad Request.", "errors": jsonable_encoder(exc.errors())},
    )


# --- Module Notes -----------------------------------------------------------
# Schema creation on startup is limited to dev/test; prod provisions tables separately.
