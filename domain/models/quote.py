from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from domain.exceptions.quote import InvalidDirection

if TYPE_CHECKING:
    from infrastructure.providers.base import QuoteSource


class TradeDirection(str, Enum):
    BUY = "buy"
    SELL = "sell"

    @classmethod
    def parse(cls, value: "str | TradeDirection") -> "TradeDirection":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise InvalidDirection(f"Unknown trade direction '{value}', expected 'buy' or 'sell'") from e

    def rate_of(self, quote: "Quote") -> Decimal | None:
        return quote.buy_rate if self is TradeDirection.BUY else quote.sell_rate


@dataclass(frozen=True)
class Quote:
    provider: str
    currency_pair: str
    buy_rate: Decimal | None
    sell_rate: Decimal | None
    observed_at: datetime
    source: str = "rest"


@dataclass(frozen=True)
class AggregationResult:
    requested_pair: str
    requested_direction: TradeDirection
    quotes: tuple[Quote, ...] = ()
    best_quote: Quote | None = None
    failed_providers: tuple[str, ...] = ()
    aggregated_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))


@dataclass(frozen=True)
class ProviderConfig:
    name: str
    enabled: bool
    source: "QuoteSource"


@dataclass(frozen=True)
class OrderAcknowledgement:
    order_id: str
    provider: str
    amount: Decimal
    currency: str
    side: TradeDirection
    rate: Decimal | None
    timestamp: datetime
    status: str = "pending"
