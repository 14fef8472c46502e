from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from application.services import AccountLookup, CoinListing
from domain.models.quote import AggregationResult, OrderAcknowledgement, Quote, TradeDirection


class QuoteResponse(BaseModel):
	provider: str = Field(..., description='Provider that produced the quote')
	currency_pair: str = Field(..., description='Requested currency pair')
	buy_rate: Decimal | None = Field(None, description='Price to buy the base asset')
	sell_rate: Decimal | None = Field(None, description='Price received when selling the base asset')
	observed_at: datetime = Field(..., description='When the quote was obtained')
	source: str = Field(..., description='Where the quote came from')

	@classmethod
	def from_quote(cls, quote: Quote) -> 'QuoteResponse':
		return cls(
			provider=quote.provider,
			currency_pair=quote.currency_pair,
			buy_rate=quote.buy_rate,
			sell_rate=quote.sell_rate,
			observed_at=quote.observed_at,
			source=quote.source,
		)


class RatesData(BaseModel):
	rates: list[QuoteResponse]
	best_provider: QuoteResponse | None = None
	failed_providers: list[str] = Field(default_factory=list)
	currency_pair: str
	type: TradeDirection
	timestamp: datetime

	@classmethod
	def from_result(cls, result: AggregationResult) -> 'RatesData':
		return cls(
			rates=[QuoteResponse.from_quote(q) for q in result.quotes],
			best_provider=QuoteResponse.from_quote(result.best_quote) if result.best_quote else None,
			failed_providers=list(result.failed_providers),
			currency_pair=result.requested_pair,
			type=result.requested_direction,
			timestamp=result.aggregated_at,
		)


class RatesResponse(BaseModel):
	success: bool = True
	data: RatesData


class BestProviderData(BaseModel):
	best_provider: QuoteResponse
	type: TradeDirection
	timestamp: datetime


class BestProviderResponse(BaseModel):
	success: bool = True
	data: BestProviderData


class OrderData(BaseModel):
	order_id: str
	provider: str
	amount: Decimal
	currency: str
	side: TradeDirection
	rate: Decimal | None
	status: str
	timestamp: datetime

	@classmethod
	def from_ack(cls, ack: OrderAcknowledgement) -> 'OrderData':
		return cls(
			order_id=ack.order_id,
			provider=ack.provider,
			amount=ack.amount,
			currency=ack.currency,
			side=ack.side,
			rate=ack.rate,
			status=ack.status,
			timestamp=ack.timestamp,
		)


class OrderResponse(BaseModel):
	success: bool = True
	data: OrderData


class PriceData(BaseModel):
	provider: str
	currency_pair: str
	type: TradeDirection
	rate: Decimal | None
	timestamp: datetime


class PriceResponse(BaseModel):
	success: bool = True
	data: PriceData


class ProviderRate(BaseModel):
	provider: str
	rate: Decimal | None
	status: str
	last_updated: datetime


class ComparisonData(BaseModel):
	currency_pair: str
	type: TradeDirection
	providers: list[ProviderRate]
	best_provider: ProviderRate | None = None
	timestamp: datetime


class ComparisonResponse(BaseModel):
	success: bool = True
	data: ComparisonData


class PairsData(BaseModel):
	pairs: list[str] = Field(description='Currency pairs that can be quoted')
	timestamp: datetime


class PairsResponse(BaseModel):
	success: bool = True
	data: PairsData


class Instrument(BaseModel):
	instrument: str
	active: bool = True
	enabled: bool = True


class InstrumentsData(BaseModel):
	instruments: list[Instrument]


class InstrumentsResponse(BaseModel):
	success: bool = True
	data: InstrumentsData
	note: str | None = None


class ProviderStatus(BaseModel):
	name: str
	enabled: bool


class HealthResponse(BaseModel):
	success: bool = True
	status: str
	timestamp: datetime
	providers: list[ProviderStatus]


class ErrorResponse(BaseModel):
	success: bool = False
	error: str
	message: str | None = None


class AccountResponse(BaseModel):
	success: bool = True
	data: dict[str, Any]
	note: str | None = None

	@classmethod
	def from_lookup(cls, lookup: AccountLookup) -> 'AccountResponse':
		return cls(data=lookup.data, note=lookup.note)


class TransferResponse(BaseModel):
	success: bool = True
	data: dict[str, Any]


class CoinData(BaseModel):
	id: str
	symbol: str
	name: str
	type: str
	price: Decimal
	exchange_rate: Decimal
	change_rate: Decimal
	provider: str
	provider_color: str
	last_updated: datetime

	@classmethod
	def from_listing(cls, listing: CoinListing) -> 'CoinData':
		return cls(
			id=listing.id,
			symbol=listing.symbol,
			name=listing.name,
			type=listing.type,
			price=listing.price,
			exchange_rate=listing.exchange_rate,
			change_rate=listing.change_rate,
			provider=listing.provider,
			provider_color=listing.provider_color,
			last_updated=listing.last_updated,
		)


class CoinsData(BaseModel):
	coins: list[CoinData]
	providers: list[str]
	asset_type: str
	total_coins: int
	timestamp: datetime


class CoinsResponse(BaseModel):
	success: bool = True
	data: CoinsData
