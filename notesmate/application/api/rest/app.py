"""ASGI application factory for the NotesMate API."""

import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from notesmate.application.api.v1.errors import from_validation_error, map_error
from notesmate.application.api.v1.routes import auth, employees, health, records, tenants
from notesmate.application.di import create_container
from notesmate.config import Config, configure_logging
from notesmate.domain.auth.port.password import PasswordHasher
from notesmate.domain.shared.authorization.startup import validate_all_handlers
from notesmate.domain.shared.error import NotesMateError
from notesmate.infrastructure.persistence.migrate import run_migrations
from notesmate.infrastructure.persistence.seed import (
    ensure_bootstrap_admin,
    ensure_platform_tenant,
)
from notesmate.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
ROUTERS = (health.router, auth.router, tenants.router, employees.router, records.router)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    config = await container.get(Config)
    engine = await container.get(AsyncEngine)
    hasher = await container.get(PasswordHasher)

    platform_tenant_id = await ensure_platform_tenant(engine)
    await ensure_bootstrap_admin(engine, config.auth.bootstrap_admin, hasher, platform_tenant_id)

    yield

    await container.close()


async def handle_notesmate_error(request: Request, exc: NotesMateError) -> JSONResponse:
    http_exc = map_error(exc)
    return JSONResponse(
        status_code=http_exc.status_code, content=http_exc.detail, headers=http_exc.headers
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error = from_validation_error(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, error.message)
    return await handle_notesmate_error(request, error)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500, content={"code": "internal_error", "message": "Internal server error"}
    )


def create_app(config: Config | None = None) -> FastAPI:
    """Build the app. Without ``config``, settings are read from the environment."""
    config = config or Config()
    configure_logging(config.logging)

    server = config.server
    logger.info("Starting %s v%s (%s)", server.name, server.version, server.environment)

    # Every handler must declare __auth__ before anything is served
    validate_all_handlers()
    if config.database.auto_migrate:
        run_migrations(config.database.url)

    app = FastAPI(
        title=server.name,
        description=server.description,
        version=server.version,
        lifespan=lifespan,
    )
    logfire.instrument_fastapi(app)
    setup_dishka(create_container(config), app)

    for router in ROUTERS:
        app.include_router(router, prefix=API_PREFIX)

    app.add_exception_handler(NotesMateError, handle_notesmate_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
    return app
