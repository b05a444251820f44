# nosec B101


import json
from unittest.mock import AsyncMock, Mock

import httpx
import pytest
from pydantic import ValidationError

from domain.models.rates import RateSnapshot
from infrastructure.providers.coindesk import CoinDeskProvider


TEST_URL = 'https://rates.example.test/v1/bpi/currentprice.json'


def make_response(payload) -> Mock:
    mock_response = Mock()
    mock_response.content = json.dumps(payload).encode()
    mock_response.text = json.dumps(payload)
    mock_response.raise_for_status = Mock()
    return mock_response


@pytest.mark.asyncio
async def test_fetch_snapshot_success_returns_snapshot(snapshot_payload):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response(snapshot_payload)

    provider = CoinDeskProvider(url=TEST_URL, client=mock_client)

    snapshot = await provider.fetch_snapshot()

    assert isinstance(snapshot, RateSnapshot)
    assert set(snapshot.bpi) == {'USD', 'GBP', 'EUR'}
    assert snapshot.time.updated_iso == '2024-09-02T07:07:20+00:00'
    mock_client.get.assert_called_once_with(TEST_URL)


@pytest.mark.asyncio
async def test_fetch_snapshot_accepts_unknown_currency_codes(snapshot_payload):
    snapshot_payload['bpi']['TWD'] = {'code': 'TWD', 'rate_float': 1850000.5}
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response(snapshot_payload)

    provider = CoinDeskProvider(url=TEST_URL, client=mock_client)
    snapshot = await provider.fetch_snapshot()

    assert snapshot.bpi['TWD'].rate_float == pytest.approx(1850000.5)


@pytest.mark.asyncio
async def test_fetch_snapshot_http_500_propagates_unwrapped():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    error_response = Mock()
    error_response.status_code = 500
    error_response.text = 'Internal Server Error'

    mock_response = Mock()
    mock_response.raise_for_status = Mock(
        side_effect=httpx.HTTPStatusError('Server error', request=Mock(), response=error_response)
    )
    mock_client.get.return_value = mock_response

    provider = CoinDeskProvider(url=TEST_URL, client=mock_client)

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await provider.fetch_snapshot()

    assert exc_info.value.response.status_code == 500


@pytest.mark.asyncio
async def test_fetch_snapshot_timeout_propagates_unwrapped():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.ReadTimeout('Request timed out')

    provider = CoinDeskProvider(url=TEST_URL, client=mock_client)

    with pytest.raises(httpx.ReadTimeout):
        await provider.fetch_snapshot()

    mock_client.get.assert_called_once()


@pytest.mark.asyncio
async def test_fetch_snapshot_connection_error_is_not_retried():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.ConnectError('Connection refused')

    provider = CoinDeskProvider(url=TEST_URL, client=mock_client)

    with pytest.raises(httpx.ConnectError):
        await provider.fetch_snapshot()

    assert mock_client.get.call_count == 1


@pytest.mark.asyncio
async def test_fetch_snapshot_malformed_body_raises_validation_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.raise_for_status = Mock()
    mock_response.content = b'not json at all'
    mock_response.text = 'not json at all'
    mock_client.get.return_value = mock_response

    provider = CoinDeskProvider(url=TEST_URL, client=mock_client)

    with pytest.raises(ValidationError):
        await provider.fetch_snapshot()


@pytest.mark.asyncio
async def test_fetch_snapshot_over_mock_transport(snapshot_payload):
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == TEST_URL
        return httpx.Response(200, json=snapshot_payload)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    provider = CoinDeskProvider(url=TEST_URL, client=client)

    snapshot = await provider.fetch_snapshot()
    await provider.close()

    assert snapshot.chart_name == 'Bitcoin'


@pytest.mark.asyncio
async def test_mock_transport_404_raises_status_error():
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(404, text='gone'))
    )
    provider = CoinDeskProvider(url=TEST_URL, client=client)

    with pytest.raises(httpx.HTTPStatusError):
        await provider.fetch_snapshot()

    await provider.close()


@pytest.mark.asyncio
async def test_default_client_uses_configured_timeouts():
    provider = CoinDeskProvider(url=TEST_URL, connect_timeout_ms=2000, read_timeout_ms=3500)

    timeout = provider._client.timeout
    assert timeout.connect == 2.0
    assert timeout.read == 3.5

    await provider.close()


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    provider = CoinDeskProvider(url=TEST_URL, client=mock_client)

    await provider.close()

    mock_client.aclose.assert_called_once()
