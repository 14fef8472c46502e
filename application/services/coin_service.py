import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal

from domain.models.market import COINS, PROVIDER_COLORS, Coin
from domain.models.quote import ProviderConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoinListing:
	symbol: str
	name: str
	type: str
	provider: str
	provider_color: str
	price: Decimal
	exchange_rate: Decimal
	change_rate: Decimal
	last_updated: datetime

	@property
	def id(self) -> str:
		return f'{self.symbol}-{self.provider}'


class CoinService:
	"""Synthetic per-provider prices for the coin catalogue."""

	def __init__(self, providers: Sequence[ProviderConfig], rng: random.Random | None = None):
		self.providers = {p.name: p for p in providers}
		self._rng = rng or random.Random()

	def _listing(self, coin: Coin, provider: str, now: datetime) -> CoinListing:
		# within 1% of the base price
		price = coin.base_price * (1 + Decimal(str((self._rng.random() - 0.5) * 0.02)))
		if coin.type == 'stablecoin':
			exchange_rate = Decimal(str(0.99 + self._rng.random() * 0.02))
		else:
			exchange_rate = price * Decimal(str(0.95 + self._rng.random() * 0.1))
		change_rate = Decimal(str((self._rng.random() - 0.5) * 2))

		return CoinListing(
			symbol=coin.symbol,
			name=coin.name,
			type=coin.type,
			provider=provider,
			provider_color=PROVIDER_COLORS.get(provider, 'bg-gray-500'),
			price=price.quantize(Decimal('0.000001')),
			exchange_rate=exchange_rate.quantize(Decimal('0.0001')),
			change_rate=change_rate.quantize(Decimal('0.01')),
			last_updated=now,
		)

	def list_coins(self, providers: Sequence[str], asset_type: str = 'all') -> list[CoinListing]:
		"""
		One listing per coin and requested provider.

		Unknown or disabled providers are skipped. ``asset_type`` other than
		``all`` keeps only coins of that type.
		"""
		selected = [self.providers[name] for name in providers if name in self.providers]
		selected = [p for p in selected if p.enabled]
		now = datetime.now(tz=UTC)

		listings = [
			self._listing(coin, provider.name, now)
			for coin in COINS
			if asset_type == 'all' or coin.type == asset_type
			for provider in selected
		]
		logger.info(f'Generated {len(listings)} coin entries for {len(providers)} providers')
		return listings
