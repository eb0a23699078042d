from __future__ import annotations

from fastapi import APIRouter, Request

from portal.repositories.base import StorageReadError
from portal.routers import fail, get_user_service
from portal.routers.users import READ_ERROR_MESSAGE

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats")
def stats(request: Request):
    svc = get_user_service(request)
    try:
        data = svc.stats()
    except StorageReadError:
        return fail(503, READ_ERROR_MESSAGE)
    return {"success": True, "stats": data}
