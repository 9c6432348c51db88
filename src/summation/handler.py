"""AWS Lambda entry points.

``handler`` serves direct invocations whose event is the request payload
itself (``{"input": [1, 2, 3]}``) and returns ``{"sum": 6}``. A ``DecodeError``
is re-raised so the runtime reports it as the invocation error.

``http_handler`` serves API Gateway proxy events through the FastAPI app.
"""

import logging
from typing import Any

from mangum import Mangum

from summation.core.errors import DecodeError
from summation.core.logging import request_id_ctx
from summation.main import app, settings
from summation.services.summation import get_summation_service

logger = logging.getLogger(__name__)


def handler(event: Any, context: Any = None) -> dict[str, int]:
    request_id = getattr(context, "aws_request_id", None)
    token = request_id_ctx.set(request_id)
    try:
        service = get_summation_service()
        try:
            request = service.decode(event)
        except DecodeError as exc:
            logger.warning("Decode failed: %s", exc.message, extra={"env": settings.env})
            raise
        response = service.compute(request)
        logger.info(
            "Summation completed",
            extra={"items": len(request.input), "policy": service.policy.value},
        )
        return response.model_dump()
    finally:
        request_id_ctx.reset(token)


http_handler = Mangum(app, lifespan="off")
