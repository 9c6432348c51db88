import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class DecodeError(Exception):
    """Raised when an incoming payload cannot be parsed into a summation request."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []


def _request_fields(request: Request, status_code: int) -> dict[str, Any]:
    return {"path": request.url.path, "method": request.method, "status_code": status_code}


async def decode_exception_handler(request: Request, exc: DecodeError) -> JSONResponse:
    logger.warning("Rejected payload: %s", exc.message, extra=_request_fields(request, 400))
    return JSONResponse(
        status_code=400,
        content={"detail": "decode_error", "code": 400, "errors": exc.errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    status_code = exc.status_code
    logger.info("Route error: %s", exc.detail, extra=_request_fields(request, status_code))
    return JSONResponse(status_code=status_code, content={"detail": exc.detail, "code": status_code})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Summation request crashed", exc_info=exc, extra=_request_fields(request, 500))
    return JSONResponse(status_code=500, content={"detail": "internal_error", "code": 500})
