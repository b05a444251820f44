from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_rate_service
from api.schemas import NormalizedRatesResponse
from application.services import RateService
from domain.models.rates import RateSnapshot

router = APIRouter(prefix='/api/coindesk', tags=['rates'])


@router.get(
	'/original',
	response_model=RateSnapshot,
	status_code=status.HTTP_200_OK,
	summary='Raw upstream rate snapshot',
)
async def get_original_snapshot(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> RateSnapshot:
	return await service.get_original_snapshot()


@router.get(
	'/transformed',
	response_model=NormalizedRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Rates merged with stored currency names',
)
async def get_transformed_rates(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> NormalizedRatesResponse:
	rates = await service.get_normalized_rates()
	return NormalizedRatesResponse.from_domain(rates)
