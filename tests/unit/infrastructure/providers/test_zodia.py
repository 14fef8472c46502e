# nosec B101


import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, Mock
import httpx

from infrastructure.providers.zodia import ZodiaQuoteSource
from domain.exceptions.quote import ProviderUnavailable


def make_response(payload):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status = Mock()
    return response


@pytest.mark.asyncio
async def test_fetch_quote_success_returns_quote():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response({'buy': 85.21, 'sell': 84.93})

    source = ZodiaQuoteSource(api_key='test_key', base_url='https://zodia.test/', client=mock_client)
    quote = await source.fetch_quote('USDT-INR')

    assert quote.provider == 'Zodia'
    assert quote.currency_pair == 'USDT-INR'
    assert quote.buy_rate == Decimal('85.21')
    assert quote.sell_rate == Decimal('84.93')
    assert quote.source == 'rest'
    assert quote.observed_at.tzinfo is not None

    mock_client.get.assert_called_once()
    call_args = mock_client.get.call_args
    assert call_args[0][0] == 'https://zodia.test/v1/prices/USDT-INR'
    assert call_args[1]['headers']['x-api-key'] == 'test_key'


@pytest.mark.asyncio
async def test_fetch_quote_echoes_pair_unchanged():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response({'buy': '1.0', 'sell': '0.99'})

    source = ZodiaQuoteSource(api_key='test_key', client=mock_client)
    quote = await source.fetch_quote('usdc.usd')

    assert quote.currency_pair == 'usdc.usd'


@pytest.mark.asyncio
async def test_fetch_quote_without_api_key_fails_without_calling_upstream():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    source = ZodiaQuoteSource(api_key='', client=mock_client)

    with pytest.raises(ProviderUnavailable) as exc_info:
        await source.fetch_quote('USDT-INR')

    assert 'API key not configured' in str(exc_info.value)
    assert exc_info.value.provider == 'Zodia'
    mock_client.get.assert_not_called()


@pytest.mark.asyncio
async def test_fetch_quote_http_500_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    error_response = Mock()
    error_response.status_code = 500
    error_response.text = 'Internal Server Error'

    mock_client.get.side_effect = httpx.HTTPStatusError(
        'Server error',
        request=Mock(),
        response=error_response
    )

    source = ZodiaQuoteSource(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderUnavailable) as exc_info:
        await source.fetch_quote('USDT-INR')

    assert 'HTTP error 500' in str(exc_info.value)
    assert mock_client.get.call_count == 1


@pytest.mark.asyncio
async def test_fetch_quote_network_timeout_is_retried_once():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.TimeoutException('Request timed out')

    source = ZodiaQuoteSource(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderUnavailable) as exc_info:
        await source.fetch_quote('USDT-INR')

    assert 'request failed' in str(exc_info.value).lower()
    assert mock_client.get.call_count == 2


@pytest.mark.asyncio
async def test_fetch_quote_recovers_after_transient_connection_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = [
        httpx.ConnectError('Connection refused'),
        make_response({'buy': 85.0, 'sell': 84.8}),
    ]

    source = ZodiaQuoteSource(api_key='test_key', client=mock_client)
    quote = await source.fetch_quote('USDT-INR')

    assert quote.buy_rate == Decimal('85.0')
    assert mock_client.get.call_count == 2


@pytest.mark.asyncio
async def test_fetch_quote_invalid_json_response():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    response = Mock()
    response.raise_for_status = Mock()
    response.json.side_effect = ValueError('Invalid JSON')
    mock_client.get.return_value = response

    source = ZodiaQuoteSource(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderUnavailable) as exc_info:
        await source.fetch_quote('USDT-INR')

    assert 'parsing error' in str(exc_info.value).lower()


@pytest.mark.asyncio
@pytest.mark.parametrize('payload', [
    {},
    {'buy': None, 'sell': None},
    {'buy': 'n/a', 'sell': 'NaN'},
    ['not', 'an', 'object'],
])
async def test_fetch_quote_malformed_payload(payload):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response(payload)

    source = ZodiaQuoteSource(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderUnavailable):
        await source.fetch_quote('USDT-INR')


@pytest.mark.asyncio
async def test_fetch_quote_keeps_one_sided_payload():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response({'buy': 85.4})

    source = ZodiaQuoteSource(api_key='test_key', client=mock_client)
    quote = await source.fetch_quote('USDT-INR')

    assert quote.buy_rate == Decimal('85.4')
    assert quote.sell_rate is None


@pytest.mark.asyncio
async def test_fetch_instruments_success():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response({
        'instruments': [{'instrument': 'USDT.INR', 'active': True, 'enabled': True}]
    })

    source = ZodiaQuoteSource(api_key='', base_url='https://zodia.test', client=mock_client)
    instruments = await source.fetch_instruments()

    assert instruments == [{'instrument': 'USDT.INR', 'active': True, 'enabled': True}]
    assert mock_client.get.call_args[0][0] == 'https://zodia.test/zm/rest/available-instruments'


@pytest.mark.asyncio
async def test_fetch_instruments_missing_key_returns_empty_list():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.return_value = make_response({})

    source = ZodiaQuoteSource(api_key='', client=mock_client)

    assert await source.fetch_instruments() == []


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    source = ZodiaQuoteSource(api_key='test_key', client=mock_client)

    await source.close()

    mock_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_fetch_transactions_posts_filters_with_tonce():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.post.return_value = make_response({'transactions': []})

    source = ZodiaQuoteSource(api_key='test_key', base_url='https://zodia.test', client=mock_client)
    data = await source.fetch_transactions(ccy='USD', max=10, offset=0, transactionState=None)

    assert data == {'transactions': []}
    call_args = mock_client.post.call_args
    assert call_args[0][0] == 'https://zodia.test/api/3/transaction/list'
    assert call_args[1]['headers'] == {'Rest-Key': 'test_key'}
    body = call_args[1]['json']
    assert body['ccy'] == 'USD'
    assert body['max'] == 10
    assert body['offset'] == 0
    assert 'transactionState' not in body
    assert isinstance(body['tonce'], int)


@pytest.mark.asyncio
async def test_account_request_without_api_key_fails_without_calling_upstream():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    source = ZodiaQuoteSource(api_key='', client=mock_client)

    with pytest.raises(ProviderUnavailable) as exc_info:
        await source.fetch_account()

    assert 'API key not configured' in str(exc_info.value)
    mock_client.post.assert_not_called()


@pytest.mark.asyncio
async def test_account_request_http_error_raises_provider_unavailable():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.status_code = 401
    mock_response.text = 'invalid signature'
    mock_client.post.return_value = mock_response
    mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
        'Unauthorized', request=Mock(), response=mock_response
    )

    source = ZodiaQuoteSource(api_key='test_key', client=mock_client)

    with pytest.raises(ProviderUnavailable) as exc_info:
        await source.fetch_limits()

    assert 'HTTP error 401' in str(exc_info.value)


@pytest.mark.asyncio
async def test_execute_transfer_sends_transfer_fields():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.post.return_value = make_response({'id': 'TRF_9'})

    source = ZodiaQuoteSource(api_key='test_key', base_url='https://zodia.test', client=mock_client)
    result = await source.execute_transfer('AVAILABLE', 'BROKERAGE', Decimal('250.5'), 'USD', 'group-1')

    assert result == {'id': 'TRF_9'}
    body = mock_client.post.call_args[1]['json']
    assert body['from'] == 'AVAILABLE'
    assert body['to'] == 'BROKERAGE'
    assert body['amount'] == 250.5
    assert body['accountGroupUuid'] == 'group-1'
