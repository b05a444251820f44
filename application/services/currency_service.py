import dataclasses
import logging
from collections.abc import Callable
from datetime import datetime

from domain.exceptions.currency import (
	CurrencyAlreadyExistsError,
	CurrencyNotFoundError,
	InvalidCurrencyError,
)
from domain.models.currency import (
	CODE_MAX_LENGTH,
	CODE_MIN_LENGTH,
	DISPLAY_NAME_MAX_LENGTH,
	SYMBOL_MAX_LENGTH,
	Currency,
)
from domain.models.patch import UNSET, CurrencyPatch
from infrastructure.persistence.repositories.currency import CurrencyRepository

logger = logging.getLogger(__name__)


def _validate_code(code: str | None) -> None:
	if code is None or not code.strip():
		raise InvalidCurrencyError('Currency code cannot be blank.')
	if not CODE_MIN_LENGTH <= len(code) <= CODE_MAX_LENGTH:
		raise InvalidCurrencyError(
			f'Currency code must be between {CODE_MIN_LENGTH} and {CODE_MAX_LENGTH} characters.'
		)


def _validate_display_name(display_name: str | None) -> None:
	if display_name is None:
		raise InvalidCurrencyError('Display name cannot be null when provided.')
	if not display_name.strip():
		raise InvalidCurrencyError('Display name cannot be blank.')
	if len(display_name) > DISPLAY_NAME_MAX_LENGTH:
		raise InvalidCurrencyError(
			f'Display name cannot exceed {DISPLAY_NAME_MAX_LENGTH} characters.'
		)


def _validate_symbol(symbol: str | None) -> None:
	if symbol is not None and len(symbol) > SYMBOL_MAX_LENGTH:
		raise InvalidCurrencyError(f'Symbol cannot exceed {SYMBOL_MAX_LENGTH} characters.')


class CurrencyService:
	"""Create, update, soft-delete and reactivate currency records.

	A code is in one of three states: absent, active or inactive. Only
	``create`` and ``reactivate`` look at inactive records; every other
	operation treats them as missing.
	"""

	def __init__(self, repository: CurrencyRepository, clock: Callable[[], datetime] = datetime.now):
		self.repository = repository
		self.clock = clock

	async def find_all_active(self) -> list[Currency]:
		logger.info('Fetching all active currencies.')
		return await self.repository.find_all_active()

	async def find_active_by_code(self, code: str) -> Currency:
		logger.info(f'Fetching active currency with code: {code}')
		return await self._get_active_or_raise(code)

	async def search_active_by_display_name(self, name: str) -> list[Currency]:
		logger.info(f"Searching for active currencies with display name containing: '{name}'")
		return await self.repository.search_active_by_display_name(name)

	async def create(self, code: str, display_name: str, symbol: str | None = None) -> Currency:
		logger.info(f'Attempting to create or reactivate currency with code: {code}')
		_validate_code(code)
		_validate_display_name(display_name)
		_validate_symbol(symbol)

		now = self.clock()
		existing = await self.repository.find_by_code(code, for_update=True)

		if existing is None:
			logger.info(f'Currency with code {code} does not exist. Creating new one.')
			return await self.repository.add(
				Currency(
					code=code,
					display_name=display_name,
					symbol=symbol,
					is_active=True,
					created_at=now,
					updated_at=now,
				)
			)

		if existing.is_active:
			logger.warning(f'Failed to create currency. Code already exists and is active: {code}')
			raise CurrencyAlreadyExistsError(f"Currency with code '{code}' already exists.")

		logger.info(f'Currency with code {code} exists but is inactive. Reactivating and updating.')
		return await self.repository.save(
			dataclasses.replace(
				existing,
				display_name=display_name,
				symbol=symbol,
				is_active=True,
				updated_at=now,
			)
		)

	async def replace(
		self, path_code: str, code: str, display_name: str, symbol: str | None
	) -> Currency:
		logger.info(f'Performing full update for currency with code: {path_code}')

		if path_code != code:
			raise InvalidCurrencyError(
				f"Path variable code '{path_code}' does not match request body code '{code}'."
			)
		_validate_display_name(display_name)
		_validate_symbol(symbol)

		existing = await self._get_active_or_raise(code, for_update=True)

		# Full replacement: both fields are written even when unchanged.
		return await self.repository.save(
			dataclasses.replace(existing, display_name=display_name, symbol=symbol, updated_at=self.clock())
		)

	async def partial_update(self, code: str, patch: CurrencyPatch) -> Currency:
		logger.info(f'Performing partial update for currency with code: {code}')
		existing = await self._get_active_or_raise(code, for_update=True)

		if patch.is_empty:
			logger.debug(f'Empty patch for {code}. Nothing to update.')
			return existing

		# Validate every provided field before applying any of them.
		changes = {}
		if patch.display_name is not UNSET:
			_validate_display_name(patch.display_name)
			changes['display_name'] = patch.display_name
		if patch.symbol is not UNSET:
			_validate_symbol(patch.symbol)
			changes['symbol'] = patch.symbol

		logger.debug(f'Applying partial update to {code}: {changes}')
		return await self.repository.save(dataclasses.replace(existing, **changes, updated_at=self.clock()))

	async def soft_delete(self, code: str) -> Currency:
		logger.info(f'Performing soft delete for currency with code: {code}')
		existing = await self._get_active_or_raise(code, for_update=True)

		deleted = await self.repository.save(
			dataclasses.replace(existing, is_active=False, updated_at=self.clock())
		)
		logger.info(f'Successfully soft-deleted currency with code: {code}')
		return deleted

	async def reactivate(self, code: str) -> Currency:
		logger.info(f'Attempting to reactivate currency with code: {code}')
		existing = await self.repository.find_by_code(code, for_update=True)

		if existing is None:
			raise CurrencyNotFoundError(f'Cannot reactivate. Currency not found with code: {code}')

		if existing.is_active:
			logger.warning(
				f'Attempted to reactivate an already active currency: {code}. No action taken.'
			)
			return existing

		reactivated = await self.repository.save(
			dataclasses.replace(existing, is_active=True, updated_at=self.clock())
		)
		logger.info(f'Successfully reactivated currency with code: {code}')
		return reactivated

	async def _get_active_or_raise(self, code: str, for_update: bool = False) -> Currency:
		currency = await self.repository.find_active_by_code(code, for_update=for_update)
		if currency is None:
			logger.warning(f'Active currency not found with code: {code}')
			raise CurrencyNotFoundError(f'Active currency not found with code: {code}')
		return currency
