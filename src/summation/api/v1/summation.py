from fastapi import APIRouter, Depends, Request

from summation.models.summation import SumResponse
from summation.services.summation import SummationService, get_summation_service

router = APIRouter(tags=["summation"])


@router.post("/sum", response_model=SumResponse)
async def sum_numbers(
    request: Request,
    service: SummationService = Depends(get_summation_service),
) -> SumResponse:
    """Add the integers in the ``input`` field of the JSON body."""
    body = await request.body()
    return service.compute(service.decode_body(body))
