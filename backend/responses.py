"""Standardized response infrastructure for API endpoints.

Error bodies share one envelope with structured codes and messages.
Successful post responses are the post records themselves.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from fastapi.responses import JSONResponse


class ResponseCode(str, Enum):
    """Response codes for API responses.

    Ranges: 1xxx=Client Error, 2xxx=Server Error
    """

    # Client errors
    VALIDATION_ERROR = "1000"
    POST_NOT_FOUND = "1001"

    # Server errors
    INTERNAL_ERROR = "2000"
    STORE_ERROR = "2001"


# Response messages mapped to codes
RESPONSE_MESSAGES: dict[ResponseCode, str] = {
    ResponseCode.VALIDATION_ERROR: "Request validation failed",
    ResponseCode.POST_NOT_FOUND: "Post not found",
    ResponseCode.INTERNAL_ERROR: "An internal error occurred",
    ResponseCode.STORE_ERROR: "Post store operation failed",
}

# HTTP status codes for each response code
HTTP_STATUS_MAP: dict[ResponseCode, int] = {
    ResponseCode.VALIDATION_ERROR: 400,
    ResponseCode.POST_NOT_FOUND: 404,
    ResponseCode.INTERNAL_ERROR: 500,
    ResponseCode.STORE_ERROR: 500,
}


def get_message(code: ResponseCode) -> str:
    """Get the message for a response code."""
    return RESPONSE_MESSAGES.get(code, "Unknown error")


def get_http_status(code: ResponseCode) -> int:
    """Get HTTP status code for a response code."""
    return HTTP_STATUS_MAP.get(code, 500)


def error_dict(
    code: ResponseCode,
    custom_message: str | None = None,
    error_details: dict[str, Any] | None = None,
    request_id: str | None = None,
) -> dict[str, Any]:
    """Build a standardized error response dictionary."""
    return {
        "code": code.value,
        "success": False,
        "message": custom_message or get_message(code),
        "timestamp": datetime.now(UTC).isoformat(),
        "request_id": request_id,
        "error_details": error_details,
    }


def error_response(
    code: ResponseCode,
    custom_message: str | None = None,
    request_id: str | None = None,
) -> JSONResponse:
    """Create a JSONResponse with error format."""
    return JSONResponse(
        content=error_dict(code, custom_message, request_id=request_id),
        status_code=get_http_status(code),
    )
