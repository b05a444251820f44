import logging
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from application.services import CurrencyService, RateService
from config.settings import get_settings
from infrastructure.persistence.database import Database
from infrastructure.persistence.repositories.currency import CurrencyRepository
from infrastructure.providers import CoinDeskProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	db: Database | None = None
	rate_provider: CoinDeskProvider | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.db = Database.from_settings(settings)
	deps.rate_provider = CoinDeskProvider(
		url=settings.RATE_SOURCE_URL,
		connect_timeout_ms=settings.RATE_SOURCE_CONNECT_TIMEOUT_MS,
		read_timeout_ms=settings.RATE_SOURCE_READ_TIMEOUT_MS,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.rate_provider:
		await deps.rate_provider.close()
	if deps.db:
		await deps.db.close()

	logger.info('Cleanup complete')


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
	if deps.db is None:
		raise RuntimeError('Database is not initialized')

	async with deps.db.session() as session:
		yield session


def get_rate_provider() -> CoinDeskProvider:
	if deps.rate_provider is None:
		raise RuntimeError('Rate provider not initialized')
	return deps.rate_provider


async def get_currency_repository(
	session: Annotated[AsyncSession, Depends(get_db_session)],
) -> CurrencyRepository:
	return CurrencyRepository(db_session=session)


async def get_currency_service(
	repository: Annotated[CurrencyRepository, Depends(get_currency_repository)],
) -> CurrencyService:
	return CurrencyService(repository=repository)


async def get_rate_service(
	provider: Annotated[CoinDeskProvider, Depends(get_rate_provider)],
	repository: Annotated[CurrencyRepository, Depends(get_currency_repository)],
) -> RateService:
	return RateService(provider=provider, repository=repository)
