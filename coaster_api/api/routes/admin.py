"""
Admin portal endpoint.

Guarded by HTTP Basic auth against the single ``admin`` user. Not part of
the coaster resource; it only shares the application.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from ...core.admin import ADMIN_GREETING
from ..dependencies import AdminPortalDep

logger = logging.getLogger(__name__)

router = APIRouter()

# auto_error=False so a missing header gets the same 401 body as a wrong one
basic_auth = HTTPBasic(auto_error=False)


@router.get(
    "",
    response_class=PlainTextResponse,
    summary="Admin portal",
    responses={401: {"description": "Unauthorized"}},
)
async def admin_portal(
    request: Request,
    portal: AdminPortalDep,
    credentials: Annotated[Optional[HTTPBasicCredentials], Depends(basic_auth)] = None,
) -> PlainTextResponse:
    username = credentials.username if credentials else None
    password = credentials.password if credentials else None

    if not portal.authenticate(username, password):
        logger.warning(
            "Admin authentication failed",
            extra={
                "client": request.client.host if request.client else None,
                "username": username,
                "portal_enabled": portal.enabled,
            },
        )
        return PlainTextResponse(
            "Unauthorized",
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Basic"},
        )

    return PlainTextResponse(ADMIN_GREETING)
