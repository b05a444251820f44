import logging

import httpx

from domain.models.rates import RateSnapshot

logger = logging.getLogger(__name__)


class CoinDeskProvider:
    """Fetches the current price snapshot from the CoinDesk-style feed.

    Transport errors, timeouts, non-2xx statuses and unreadable bodies are
    raised to the caller as-is (``httpx.HTTPError`` / ``pydantic.ValidationError``).
    """

    BASE_URL = "https://api.coindesk.com/v1/bpi/currentprice.json"

    def __init__(
        self,
        url: str = BASE_URL,
        connect_timeout_ms: int = 5000,
        read_timeout_ms: int = 5000,
        client: httpx.AsyncClient | None = None,
    ):
        self.url = url
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(
                read_timeout_ms / 1000,
                connect=connect_timeout_ms / 1000,
            )
        )

    @property
    def name(self) -> str:
        return "coindesk"

    async def fetch_snapshot(self) -> RateSnapshot:
        logger.info(f"Calling {self.name} API: {self.url}")

        response = await self._client.get(self.url)
        response.raise_for_status()
        logger.debug(f"Raw {self.name} response: {response.text[:500]}")

        snapshot = RateSnapshot.model_validate_json(response.content)
        logger.info(
            f"Received {self.name} snapshot with {len(snapshot.bpi or {})} currencies"
        )
        return snapshot

    async def close(self) -> None:
        await self._client.aclose()
