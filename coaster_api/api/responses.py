"""
Rendering of service results as HTTP responses.

JSON bodies go out as ``application/json``; messages (errors, delete
confirmation) as ``text/plain``.
"""

from fastapi import Response
from fastapi.responses import JSONResponse, PlainTextResponse

from ..core.coasters.service import ServiceResult


def render_result(result: ServiceResult) -> Response:
    status_code = int(result.status_code)

    if result.is_json:
        return JSONResponse(
            content=result.body,
            status_code=status_code,
            headers=result.headers,
        )

    if result.body is None:
        return Response(status_code=status_code, headers=result.headers)

    return PlainTextResponse(
        content=str(result.body),
        status_code=status_code,
        headers=result.headers,
    )
