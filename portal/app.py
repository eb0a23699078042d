from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from portal.core.config import Settings, get_settings
from portal.core.logging import get_logger, setup_logging
from portal.repositories import UserRepository, build_repository
from portal.routers import stats as stats_router
from portal.routers import users as users_router
from portal.services.user_service import UserService

logger = get_logger(__name__)

ENDPOINTS = (
    ("POST", "/api/register", "Register new user"),
    ("GET", "/api/users", "Get all users"),
    ("GET", "/api/user/{email}", "Get specific user"),
    ("DELETE", "/api/user/{email}", "Delete user"),
    ("GET", "/api/stats", "Get statistics"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Portal API ready on http://%s:%s", settings.host, settings.port)
    for method, path, summary in ENDPOINTS:
        logger.info("  %-6s %s - %s", method, path, summary)
    yield
    logger.info("Portal API shutting down")


def create_app(settings: Settings | None = None, repository: UserRepository | None = None) -> FastAPI:
    """Build the API; the repository argument lets tests inject a fake store."""
    settings = settings or get_settings()
    setup_logging(settings)

    repository = repository or build_repository(settings)
    repository.initialize()

    app = FastAPI(title="Smart City Citizen Portal API", lifespan=lifespan)
    app.state.settings = settings
    app.state.user_service = UserService(
        repository,
        strict_reads=settings.strict_reads,
        serialize_writes=settings.serialize_writes,
    )

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"success": False, "message": "Internal server error"})

    app.include_router(users_router.router)
    app.include_router(stats_router.router)

    # mounted last so /api routes win over the catch-all static handler
    if settings.static_dir and os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app

