from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from api.dependencies import get_currency_service
from api.schemas import (
	CurrencyCreateRequest,
	CurrencyReplaceRequest,
	CurrencyResponse,
	CurrencyUpdateRequest,
)
from application.services import CurrencyService

router = APIRouter(prefix='/api/currencies', tags=['currency'])

CodePath = Annotated[str, Path(min_length=3, max_length=10)]


@router.get(
	'',
	response_model=list[CurrencyResponse],
	status_code=status.HTTP_200_OK,
	summary='List active currencies',
)
async def get_all_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> list[CurrencyResponse]:
	currencies = await service.find_all_active()
	return [CurrencyResponse.from_domain(c) for c in currencies]


@router.get(
	'/search',
	response_model=list[CurrencyResponse],
	status_code=status.HTTP_200_OK,
	summary='Search active currencies by display name',
)
async def search_currencies(
	name: Annotated[str, Query(min_length=1)],
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> list[CurrencyResponse]:
	currencies = await service.search_active_by_display_name(name)
	return [CurrencyResponse.from_domain(c) for c in currencies]


@router.get(
	'/{code}',
	response_model=CurrencyResponse,
	status_code=status.HTTP_200_OK,
	summary='Get an active currency by code',
)
async def get_currency(
	code: CodePath,
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> CurrencyResponse:
	return CurrencyResponse.from_domain(await service.find_active_by_code(code))


@router.post(
	'',
	response_model=CurrencyResponse,
	status_code=status.HTTP_201_CREATED,
	summary='Create a currency, or reactivate a soft-deleted one',
)
async def create_currency(
	request: CurrencyCreateRequest,
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> CurrencyResponse:
	currency = await service.create(request.code, request.display_name, request.symbol)
	return CurrencyResponse.from_domain(currency)


@router.put(
	'/{code}',
	response_model=CurrencyResponse,
	status_code=status.HTTP_200_OK,
	summary='Replace an active currency',
)
async def replace_currency(
	code: CodePath,
	request: CurrencyReplaceRequest,
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> CurrencyResponse:
	currency = await service.replace(code, request.code, request.display_name, request.symbol)
	return CurrencyResponse.from_domain(currency)


@router.patch(
	'/{code}',
	response_model=CurrencyResponse,
	status_code=status.HTTP_200_OK,
	summary='Partially update an active currency',
	description='Only keys present in the body are applied. Send "symbol": null to clear the symbol.',
)
async def partial_update_currency(
	code: CodePath,
	request: CurrencyUpdateRequest,
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> CurrencyResponse:
	currency = await service.partial_update(code, request.to_patch())
	return CurrencyResponse.from_domain(currency)


@router.delete(
	'/{code}',
	status_code=status.HTTP_204_NO_CONTENT,
	summary='Soft-delete an active currency',
)
async def delete_currency(
	code: CodePath,
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> Response:
	await service.soft_delete(code)
	return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
	'/{code}/reactivate',
	response_model=CurrencyResponse,
	status_code=status.HTTP_200_OK,
	summary='Reactivate a soft-deleted currency',
)
async def reactivate_currency(
	code: CodePath,
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> CurrencyResponse:
	return CurrencyResponse.from_domain(await service.reactivate(code))
