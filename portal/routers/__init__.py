"""
FastAPI routers grouped by concern (registrations, statistics).

Each file inside this package exposes an APIRouter that is included in the
application built by portal.app.create_app.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from portal.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


def fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})
