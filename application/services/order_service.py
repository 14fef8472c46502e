import logging
import time
from datetime import UTC, datetime
from decimal import Decimal

from domain.exceptions.quote import NoQuotesAvailable, OrderRejected
from domain.models.quote import OrderAcknowledgement, Quote, TradeDirection
from infrastructure.cache.rate_cache import RateCache

logger = logging.getLogger(__name__)


class OrderService:
	def __init__(self, cache: RateCache):
		self.cache = cache

	def current_best(self, direction: TradeDirection | str) -> Quote:
		best = self.cache.best(direction)
		if best is None:
			raise NoQuotesAvailable('No rates available. Please fetch rates first.')
		return best

	def place_order(
		self, provider: str, amount: Decimal, currency: str, side: TradeDirection | str
	) -> OrderAcknowledgement:
		side = TradeDirection.parse(side)
		best = self.cache.best(side)
		if best is None or best.provider != provider:
			logger.warning(
				f'Rejected {side.value} order via {provider}: best is {best.provider if best else None}'
			)
			raise OrderRejected('Invalid provider or no rates available')

		logger.info(f'Placing {side.value} order: {amount} {currency} via {provider}')

		ack = OrderAcknowledgement(
			order_id=f'ORD_{int(time.time() * 1000)}',
			provider=provider,
			amount=amount,
			currency=currency,
			side=side,
			rate=side.rate_of(best),
			timestamp=datetime.now(tz=UTC),
		)
		logger.info(f'Order placed successfully: {ack.order_id}')
		return ack
