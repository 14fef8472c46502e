# nosec B101


import json

import pytest
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock

from domain.exceptions.quote import CacheError
from domain.models.quote import AggregationResult, Quote, TradeDirection
from infrastructure.cache.rate_cache import RateCache
from infrastructure.cache.redis_snapshot import RedisSnapshotStore


@pytest.fixture
def snapshot():
    quote = Quote(
        provider='Zodia',
        currency_pair='USDT-INR',
        buy_rate=Decimal('85.1234'),
        sell_rate=None,
        observed_at=datetime(2025, 11, 5, 10, 30, tzinfo=UTC),
        source='rest',
    )
    result = AggregationResult(
        requested_pair='USDT-INR',
        requested_direction=TradeDirection.BUY,
        quotes=(quote,),
        best_quote=quote,
        failed_providers=('Ramp',),
        aggregated_at=datetime(2025, 11, 5, 10, 30, 1, tzinfo=UTC),
    )
    return RateCache().set(result)


@pytest.mark.asyncio
async def test_save_stores_json_with_ttl(snapshot):
    mock_redis = AsyncMock()
    store = RedisSnapshotStore(redis_client=mock_redis)

    await store.save(snapshot)

    mock_redis.setex.assert_called_once()
    key, ttl, stored = mock_redis.setex.call_args[0]
    assert key == 'rates:snapshot'
    assert ttl == timedelta(hours=1)

    data = json.loads(stored)
    assert data['result']['requested_direction'] == 'buy'
    assert data['result']['quotes'][0]['buy_rate'] == '85.1234'
    assert data['result']['quotes'][0]['sell_rate'] is None
    assert data['best_by_direction']['buy']['provider'] == 'Zodia'


@pytest.mark.asyncio
async def test_load_reads_back_saved_snapshot(snapshot):
    mock_redis = AsyncMock()
    store = RedisSnapshotStore(redis_client=mock_redis)
    await store.save(snapshot)
    mock_redis.get.return_value = mock_redis.setex.call_args[0][2]

    loaded = await store.load()

    assert loaded.result == snapshot.result
    assert loaded.best_by_direction[TradeDirection.BUY] == snapshot.result.best_quote
    assert isinstance(loaded.result.quotes[0].buy_rate, Decimal)
    mock_redis.get.assert_called_once_with('rates:snapshot')


@pytest.mark.asyncio
async def test_load_cache_miss_returns_none():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = None

    store = RedisSnapshotStore(redis_client=mock_redis)

    assert await store.load() is None


@pytest.mark.asyncio
async def test_load_malformed_json_raises_cache_error():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = '{ invalid json }'

    store = RedisSnapshotStore(redis_client=mock_redis)

    with pytest.raises(CacheError) as exc_info:
        await store.load()

    assert 'Invalid json data' in str(exc_info.value)


@pytest.mark.asyncio
async def test_load_unknown_direction_raises_cache_error(snapshot):
    mock_redis = AsyncMock()
    store = RedisSnapshotStore(redis_client=mock_redis)
    await store.save(snapshot)
    data = json.loads(mock_redis.setex.call_args[0][2])
    data['result']['requested_direction'] = 'hold'
    mock_redis.get.return_value = json.dumps(data)

    with pytest.raises(CacheError):
        await store.load()
