"""
Coaster resource endpoints.

Each handler forwards the path id, the ``content-type`` header and the raw
body to ``CoasterService`` and renders whatever it returns. Status codes
are decided by the service, not here.

Handlers are plain ``def`` functions: FastAPI runs them on its thread pool,
so concurrent requests reach the store from separate threads and a slow
database call never blocks the event loop.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Header, Response, status

from ..dependencies import CoasterServiceDep, RawBody
from ..responses import render_result

logger = logging.getLogger(__name__)

router = APIRouter()

ContentType = Annotated[Optional[str], Header()]

COASTER_EXAMPLE = {
    "id": "1700000000000000000-1a2b3c4d",
    "name": "Loop",
    "manufacturer": "Acme",
    "in_park": "Six Flags",
    "height": 50,
}


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    summary="List coasters",
    description="Return every coaster as a JSON array (possibly empty).",
)
def list_coasters(service: CoasterServiceDep) -> Response:
    return render_result(service.list_coasters())


@router.get(
    "/random",
    status_code=status.HTTP_302_FOUND,
    summary="Redirect to a random coaster",
    description="302 to a uniformly chosen coaster, or 404 when there are none.",
    responses={404: {"description": "No coasters stored"}},
)
def random_coaster(service: CoasterServiceDep) -> Response:
    result = service.random_coaster()
    logger.debug(
        "Random coaster requested",
        extra={"status": int(result.status_code), "location": result.headers.get("Location")},
    )
    return render_result(result)


@router.get(
    "/{coaster_id}",
    status_code=status.HTTP_200_OK,
    summary="Get a coaster",
    responses={
        200: {"content": {"application/json": {"example": COASTER_EXAMPLE}}},
        404: {"description": "Coaster Not Found!"},
    },
)
def get_coaster(coaster_id: str, service: CoasterServiceDep) -> Response:
    return render_result(service.get_coaster(coaster_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a coaster",
    description="Body must be sent as application/json. Any id in the body is ignored.",
    responses={
        400: {"description": "Malformed body"},
        415: {"description": "Content type is not application/json"},
    },
)
def create_coaster(
    body: RawBody,
    service: CoasterServiceDep,
    content_type: ContentType = None,
) -> Response:
    return render_result(service.create_coaster(content_type, body))


@router.put(
    "/{coaster_id}",
    status_code=status.HTTP_200_OK,
    summary="Replace a coaster",
    description="Full replacement. The id in the path wins over any id in the body.",
    responses={
        400: {"description": "Malformed body"},
        404: {"description": "Coaster Not Found!"},
        415: {"description": "Content type is not application/json"},
    },
)
def update_coaster(
    coaster_id: str,
    body: RawBody,
    service: CoasterServiceDep,
    content_type: ContentType = None,
) -> Response:
    return render_result(service.update_coaster(coaster_id, content_type, body))


@router.delete(
    "/{coaster_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete a coaster",
    responses={404: {"description": "Coaster Not Found!"}},
)
def delete_coaster(coaster_id: str, service: CoasterServiceDep) -> Response:
    return render_result(service.delete_coaster(coaster_id))
