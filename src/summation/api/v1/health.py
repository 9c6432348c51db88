from fastapi import APIRouter, Depends, Request

from summation.models.common import HealthResponse
from summation.services.summation import SummationService, get_summation_service

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(
    request: Request,
    service: SummationService = Depends(get_summation_service),
) -> HealthResponse:
    return HealthResponse(
        version=str(request.app.version or "0.0.0"),
        overflow_policy=service.policy,
        integer_width=service.width,
    )
