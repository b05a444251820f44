import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from domain.exceptions.currency import (
	CurrencyAlreadyExistsError,
	CurrencyNotFoundError,
	InvalidCurrencyError,
)
from domain.models.rates import RateSnapshot

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidCurrencyError)
	async def invalid_currency_handler(request: Request, exc: InvalidCurrencyError):
		logger.warning(f'Invalid argument provided: {exc}')
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(CurrencyNotFoundError)
	async def currency_not_found_handler(request: Request, exc: CurrencyNotFoundError):
		logger.warning(f'Currency not found: {exc}')
		return JSONResponse(status_code=404, content={'detail': str(exc)})

	@app.exception_handler(CurrencyAlreadyExistsError)
	async def currency_exists_handler(request: Request, exc: CurrencyAlreadyExistsError):
		logger.warning(f'Currency conflict: {exc}')
		return JSONResponse(status_code=409, content={'detail': str(exc)})

	@app.exception_handler(httpx.HTTPError)
	async def rate_source_error_handler(request: Request, exc: httpx.HTTPError):
		logger.error(f'Rate source error: {exc.__class__.__name__}: {exc}')
		return JSONResponse(status_code=502, content={'detail': 'Rate source unavailable'})

	@app.exception_handler(ValidationError)
	async def validation_error_handler(request: Request, exc: ValidationError):
		if exc.title == RateSnapshot.__name__:
			logger.error(f'Rate source returned an unreadable body: {exc}')
			return JSONResponse(status_code=502, content={'detail': 'Rate source unavailable'})
		logger.error(f'Unhandled validation error: {exc}', exc_info=exc)
		return JSONResponse(status_code=500, content={'detail': 'Internal server error'})

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return JSONResponse(status_code=500, content={'detail': 'Internal server error'})
