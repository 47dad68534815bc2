"""
FastAPI dependency injection.

Dependencies hand route handlers the objects built once by ``create_app``
(service, admin portal) plus request-level values such as the raw body.
Routes never construct their own collaborators, so tests can build an app
around any store or id generator.
"""

from typing import Annotated

from fastapi import Depends, Request

from ..config.settings import Settings
from ..core.admin import AdminPortal
from ..core.coasters.service import CoasterService


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_coaster_service(request: Request) -> CoasterService:
    """The process-wide coaster service (one store shared by all requests)."""
    return request.app.state.coaster_service


def get_admin_portal(request: Request) -> AdminPortal:
    return request.app.state.admin_portal


async def read_raw_body(request: Request) -> bytes:
    """
    Raw request body, unparsed.

    Coaster writes validate content type and JSON themselves, so the body
    must reach the service exactly as sent.
    """
    return await request.body()


# ---------------------------------------------------------------------------
# Convenience Type Aliases
# ---------------------------------------------------------------------------

SettingsDep = Annotated[Settings, Depends(get_app_settings)]
CoasterServiceDep = Annotated[CoasterService, Depends(get_coaster_service)]
AdminPortalDep = Annotated[AdminPortal, Depends(get_admin_portal)]
RawBody = Annotated[bytes, Depends(read_raw_body)]
