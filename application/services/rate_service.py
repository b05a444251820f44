import logging

from application.services.rate_transformer import merge
from domain.models.currency import NormalizedRates
from domain.models.rates import RateSnapshot
from infrastructure.persistence.repositories.currency import CurrencyRepository
from infrastructure.providers.coindesk import CoinDeskProvider

logger = logging.getLogger(__name__)


class RateService:
    def __init__(self, provider: CoinDeskProvider, repository: CurrencyRepository):
        self.provider = provider
        self.repository = repository

    async def get_original_snapshot(self) -> RateSnapshot:
        return await self.provider.fetch_snapshot()

    async def get_normalized_rates(self) -> NormalizedRates:
        logger.info("Building normalized rates")

        snapshot = await self.provider.fetch_snapshot()

        currencies = await self.repository.find_all_active()
        lookup = {c.code: c.display_name for c in currencies}
        logger.debug(f"Loaded {len(lookup)} active currency names for mapping")

        return merge(snapshot, lookup)
