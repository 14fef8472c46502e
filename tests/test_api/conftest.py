from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_providers, get_rate_cache, get_rate_service, get_zodia_source
from api.main import app
from application.services import RateService
from domain.models.quote import ProviderConfig, Quote
from infrastructure.cache.rate_cache import RateCache
from infrastructure.providers import ZodiaQuoteSource


def make_quote(provider, buy_rate, sell_rate, pair='USDT-INR'):
    return Quote(
        provider=provider,
        currency_pair=pair,
        buy_rate=Decimal(buy_rate),
        sell_rate=Decimal(sell_rate),
        observed_at=datetime(2025, 11, 5, 10, 0, tzinfo=UTC),
    )


def make_provider(name, buy_rate, sell_rate, enabled=True):
    source = AsyncMock()
    source.fetch_quote.side_effect = lambda pair: make_quote(name, buy_rate, sell_rate, pair)
    return ProviderConfig(name=name, enabled=enabled, source=source)


@pytest.fixture
def providers():
    return [
        make_provider('Zodia', '85.2', '85.0'),
        make_provider('TransFi', '84.8', '84.6'),
        make_provider('Ramp', '85.5', '85.3'),
    ]


@pytest.fixture
def rate_cache():
    return RateCache()


@pytest.fixture
def mock_zodia():
    return AsyncMock(spec=ZodiaQuoteSource)


@pytest.fixture
def client(providers, rate_cache, mock_zodia):
    app.dependency_overrides[get_providers] = lambda: providers
    app.dependency_overrides[get_rate_cache] = lambda: rate_cache
    app.dependency_overrides[get_rate_service] = lambda: RateService(providers=providers, cache=rate_cache)
    app.dependency_overrides[get_zodia_source] = lambda: mock_zodia
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
