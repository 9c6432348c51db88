import logging
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from summation.core.config import get_settings
from summation.core.logging import request_id_ctx

logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID to each HTTP invocation and echo it back."""

    def __init__(self, app) -> None:  # type: ignore[override]
        super().__init__(app)
        self.header_name = get_settings().request_id_header

    async def dispatch(  # type: ignore[override]
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        token = request_id_ctx.set(request_id)
        request.state.request_id = request_id

        try:
            response = await call_next(request)
            logger.info(
                "Request served",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                },
            )
        finally:
            request_id_ctx.reset(token)

        response.headers[self.header_name] = request_id
        return response
