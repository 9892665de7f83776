"""Admin endpoints.

POST /api/admin/auth checks the shared admin password.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from catalog.routes.deps import get_app_settings
from catalog.schemas import AdminAuthRequest, AdminAuthResponse
from catalog.services.admin_auth import AdminAuthResult, check_admin_password
from catalog.settings import Settings

router = APIRouter()
logger = logging.getLogger("uvicorn.error")

_OUTCOMES = {
    AdminAuthResult.OK: (200, True, "Authorized"),
    AdminAuthResult.MISSING: (400, False, "Password is required"),
    AdminAuthResult.MISMATCH: (401, False, "Invalid password"),
}


@router.post(
    "/auth",
    response_model=AdminAuthResponse,
    responses={
        400: {"model": AdminAuthResponse, "description": "Password missing"},
        401: {"model": AdminAuthResponse, "description": "Password mismatch"},
    },
)
async def admin_auth(
    body: AdminAuthRequest | None = None,
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """Check the submitted password against ADMIN_PASSWORD."""
    result = check_admin_password(body.password if body else None, settings.admin_password)
    status_code, success, message = _OUTCOMES[result]
    if result is AdminAuthResult.MISMATCH:
        logger.warning("[admin] rejected admin password")

    return JSONResponse(
        status_code=status_code,
        content=AdminAuthResponse(success=success, message=message).model_dump(),
    )
