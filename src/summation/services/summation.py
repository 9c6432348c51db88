import json
import logging
from collections.abc import Iterable
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from summation.core.config import OverflowPolicy, Settings, get_settings
from summation.core.errors import DecodeError
from summation.models.summation import SumRequest, SumResponse

logger = logging.getLogger(__name__)


def signed_bounds(width: int) -> tuple[int, int]:
    """Smallest and largest signed integer representable in ``width`` bits."""
    half = 1 << (width - 1)
    return -half, half - 1


def sum_integers(
    values: Iterable[int],
    policy: OverflowPolicy = OverflowPolicy.WRAP,
    width: int = 64,
) -> int:
    """Add ``values`` and reduce the total according to ``policy``.

    ``WRAP`` folds the exact total into two's-complement range, which matches
    adding one element at a time with native fixed-width integers. ``SATURATE``
    clamps the exact total once so the result does not depend on element order.
    """
    total = 0
    for value in values:
        total += value

    if policy is OverflowPolicy.UNBOUNDED:
        return total

    lower, upper = signed_bounds(width)
    if policy is OverflowPolicy.SATURATE:
        return max(lower, min(upper, total))

    modulus = 1 << width
    return (total - lower) % modulus + lower


class SummationService:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.policy = self.settings.overflow_policy
        self.width = self.settings.integer_width

    def decode_body(self, body: bytes) -> SumRequest:
        """Parse a raw JSON request body, then decode it like an event."""
        try:
            payload = json.loads(body)
        except ValueError as exc:
            raise DecodeError(
                "payload_not_json",
                [{"type": "json_invalid", "loc": [], "msg": str(exc)}],
            ) from exc
        return self.decode(payload)

    def decode(self, payload: Any) -> SumRequest:
        """Decode an already-parsed JSON value. Only an object or ``None`` is accepted."""
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise DecodeError(
                "payload_not_object",
                [
                    {
                        "type": "dict_type",
                        "loc": [],
                        "msg": f"expected a JSON object, got {type(payload).__name__}",
                    }
                ],
            )

        try:
            request = SumRequest.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(
                "invalid_request", exc.errors(include_url=False, include_context=False)
            ) from exc

        self._check_range(request.input)
        return request

    def _check_range(self, values: list[int]) -> None:
        if self.policy is OverflowPolicy.UNBOUNDED:
            return
        lower, upper = signed_bounds(self.width)
        errors = [
            {
                "type": "int_out_of_range",
                "loc": ("input", index),
                "msg": f"value does not fit in a {self.width}-bit signed integer",
                "input": value,
            }
            for index, value in enumerate(values)
            if not lower <= value <= upper
        ]
        if errors:
            raise DecodeError("number_out_of_range", errors)

    def compute(self, request: SumRequest) -> SumResponse:
        total = sum_integers(request.input, self.policy, self.width)
        logger.debug(
            "Summed request",
            extra={"items": len(request.input), "policy": self.policy.value},
        )
        return SumResponse(sum=total)

    def handle(self, payload: Any) -> SumResponse:
        return self.compute(self.decode(payload))


@lru_cache
def get_summation_service() -> SummationService:
    return SummationService()
