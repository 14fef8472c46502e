# nosec B101


import random

from decimal import Decimal
from unittest.mock import AsyncMock

from application.services.coin_service import CoinService
from domain.models.market import COINS
from domain.models.quote import ProviderConfig


def make_providers(ramp_enabled=True):
    return [
        ProviderConfig(name='Zodia', enabled=True, source=AsyncMock()),
        ProviderConfig(name='TransFi', enabled=True, source=AsyncMock()),
        ProviderConfig(name='Ramp', enabled=ramp_enabled, source=AsyncMock()),
    ]


def test_one_listing_per_coin_and_provider():
    service = CoinService(make_providers(), rng=random.Random(7))

    listings = service.list_coins(['Zodia', 'Ramp'])

    assert len(listings) == len(COINS) * 2
    assert listings[0].id == 'USDT-Zodia'
    assert listings[1].id == 'USDT-Ramp'
    assert listings[0].provider_color == 'bg-blue-500'


def test_asset_type_filter():
    service = CoinService(make_providers(), rng=random.Random(7))

    listings = service.list_coins(['Zodia'], asset_type='crypto')

    assert [item.symbol for item in listings] == ['BTC', 'ETH', 'BNB', 'SOL']


def test_unknown_and_disabled_providers_are_skipped():
    service = CoinService(make_providers(ramp_enabled=False), rng=random.Random(7))

    listings = service.list_coins(['Ramp', 'Binance', 'TransFi'], asset_type='stablecoin')

    assert {item.provider for item in listings} == {'TransFi'}
    assert len(listings) == 6


def test_prices_stay_in_band():
    service = CoinService(make_providers(), rng=random.Random(11))

    for item in service.list_coins(['Zodia', 'TransFi', 'Ramp']):
        base = next(c.base_price for c in COINS if c.symbol == item.symbol)
        assert abs(item.price - base) <= base * Decimal('0.01')
        assert Decimal('-1') <= item.change_rate <= Decimal('1')
        if item.type == 'stablecoin':
            assert Decimal('0.99') <= item.exchange_rate <= Decimal('1.01')
        assert item.price.as_tuple().exponent == -6
        assert item.exchange_rate.as_tuple().exponent == -4


def test_seeded_rng_is_deterministic():
    first = CoinService(make_providers(), rng=random.Random(3)).list_coins(['Zodia'])
    second = CoinService(make_providers(), rng=random.Random(3)).list_coins(['Zodia'])

    assert [item.price for item in first] == [item.price for item in second]
