import asyncio
import logging
import random
from datetime import UTC, datetime
from decimal import Decimal

from domain.models.quote import Quote

logger = logging.getLogger(__name__)


class SyntheticQuoteSource:
    """
    Generates a plausible quote inside a fixed band around configured centres.

    Used for providers that have no live integration yet. ``latency`` is a
    ``(min, max)`` range in seconds slept before answering, to behave like a
    network call inside the aggregator.
    """

    def __init__(
        self,
        name: str,
        buy_centre: Decimal = Decimal("85.0"),
        sell_centre: Decimal = Decimal("84.8"),
        band: Decimal = Decimal("3.0"),
        latency: tuple[float, float] = (0.1, 0.3),
        rng: random.Random | None = None,
    ):
        if band < 0:
            raise ValueError("band must not be negative")
        self._name = name
        self.buy_centre = Decimal(buy_centre)
        self.sell_centre = Decimal(sell_centre)
        self.band = Decimal(band)
        self.latency = latency
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return self._name

    def _jitter(self, centre: Decimal) -> Decimal:
        offset = Decimal(str(self._rng.random() - 0.5)) * self.band
        return (centre + offset).quantize(Decimal("0.0001"))

    async def fetch_quote(self, currency_pair: str) -> Quote:
        low, high = self.latency
        if high > 0:
            await asyncio.sleep(self._rng.uniform(low, high))

        quote = Quote(
            provider=self.name,
            currency_pair=currency_pair,
            buy_rate=self._jitter(self.buy_centre),
            sell_rate=self._jitter(self.sell_centre),
            observed_at=datetime.now(tz=UTC),
            source="synthetic",
        )
        logger.debug(f"{self.name} synthetic quote for {currency_pair}: buy={quote.buy_rate} sell={quote.sell_rate}")
        return quote

    async def close(self) -> None:
        return None
