from __future__ import annotations

from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from portal.repositories.base import StorageReadError
from portal.routers import fail, get_user_service
from portal.services.user_service import (
    StorageWriteError,
    UserNotFoundError,
    ValidationError,
)

router = APIRouter(prefix="/api", tags=["users"])

READ_ERROR_MESSAGE = "Error reading user data"
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_payload(request: Request) -> dict:
    """Accept a JSON object or a submitted HTML form; anything else has no fields."""
    content_type = (request.headers.get("content-type") or "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    try:
        data = await request.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


@router.post("/register")
async def register(request: Request):
    svc = get_user_service(request)
    payload = await _read_payload(request)
    try:
        user = await run_in_threadpool(svc.register, payload)
    except ValidationError as exc:
        return fail(400, exc.message)
    except StorageWriteError as exc:
        return fail(500, exc.message)
    except StorageReadError:
        return fail(503, READ_ERROR_MESSAGE)
    return {"success": True, "message": "Registration successful!", "user": user}


@router.get("/users")
def list_users(request: Request):
    svc = get_user_service(request)
    try:
        users = svc.list_users()
    except StorageReadError:
        return fail(503, READ_ERROR_MESSAGE)
    return {"success": True, "count": len(users), "users": users}


@router.get("/user/{email}")
def get_user(email: str, request: Request):
    svc = get_user_service(request)
    try:
        user = svc.get_user(email)
    except UserNotFoundError as exc:
        return fail(404, exc.message)
    except StorageReadError:
        return fail(503, READ_ERROR_MESSAGE)
    return {"success": True, "user": user}


@router.delete("/user/{email}")
def delete_user(email: str, request: Request):
    svc = get_user_service(request)
    try:
        svc.delete_user(email)
    except UserNotFoundError as exc:
        return fail(404, exc.message)
    except StorageWriteError as exc:
        return fail(500, exc.message)
    except StorageReadError:
        return fail(503, READ_ERROR_MESSAGE)
    return {"success": True, "message": "User deleted successfully"}
