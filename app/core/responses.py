# app/core/responses.py
"""
Envelope and CORS helpers shared by every JSON endpoint.
"""
from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

JSON_MEDIA_TYPE = "application/json; charset=utf-8"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
    "Access-Control-Max-Age": "86400",
}

DEFAULT_SUCCESS_MESSAGE = "OK"
DEFAULT_FAILURE_MESSAGE = "Request failed"


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def api_response(
    data: Any = None,
    status_code: int = 200,
    message: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    **extra: Any,
) -> JSONResponse:
    """
    Build the uniform ``{success, data, message}`` envelope.

    Extra keyword arguments (``count``, ``total``) are added at the top
    level next to the envelope fields. ``headers`` (e.g. ``Allow`` on a
    405) are sent alongside the CORS headers.
    """
    success = is_success(status_code)
    if not message:
        message = DEFAULT_SUCCESS_MESSAGE if success else DEFAULT_FAILURE_MESSAGE

    body = {"success": success, "data": data, "message": message}
    body.update(extra)

    response_headers = dict(CORS_HEADERS)
    if headers:
        response_headers.update(headers)

    return JSONResponse(
        content=jsonable_encoder(body, by_alias=True),
        status_code=status_code,
        headers=response_headers,
        media_type=JSON_MEDIA_TYPE,
    )


def cors_preflight_response() -> Response:
    """Empty 200 answer to an OPTIONS request."""
    return Response(status_code=200, headers=dict(CORS_HEADERS))
