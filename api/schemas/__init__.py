from .requests import OrderRequest, TransferRequest
from .responses import (
	AccountResponse,
	BestProviderData,
	BestProviderResponse,
	CoinData,
	CoinsData,
	CoinsResponse,
	ComparisonData,
	ComparisonResponse,
	ErrorResponse,
	HealthResponse,
	Instrument,
	InstrumentsData,
	InstrumentsResponse,
	OrderData,
	OrderResponse,
	PairsData,
	PairsResponse,
	PriceData,
	PriceResponse,
	ProviderRate,
	ProviderStatus,
	QuoteResponse,
	RatesData,
	RatesResponse,
	TransferResponse,
)

__all__ = [
	'AccountResponse',
	'BestProviderData',
	'BestProviderResponse',
	'CoinData',
	'CoinsData',
	'CoinsResponse',
	'ComparisonData',
	'ComparisonResponse',
	'ErrorResponse',
	'HealthResponse',
	'Instrument',
	'InstrumentsData',
	'InstrumentsResponse',
	'OrderData',
	'OrderRequest',
	'OrderResponse',
	'PairsData',
	'PairsResponse',
	'PriceData',
	'PriceResponse',
	'ProviderRate',
	'ProviderStatus',
	'QuoteResponse',
	'RatesData',
	'RatesResponse',
	'TransferRequest',
	'TransferResponse',
]
