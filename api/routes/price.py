import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_rate_service, get_zodia_source
from api.schemas import (
	ComparisonData,
	ComparisonResponse,
	PairsData,
	PairsResponse,
	PriceData,
	PriceResponse,
	ProviderRate,
)
from application.services import RateService
from domain.models.market import SUPPORTED_PAIRS
from domain.models.quote import Quote, TradeDirection
from infrastructure.providers import ZodiaQuoteSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api/price', tags=['price'])


def _provider_rate(quote: Quote, direction: TradeDirection) -> ProviderRate:
	return ProviderRate(
		provider=quote.provider,
		rate=direction.rate_of(quote),
		status='active',
		last_updated=quote.observed_at,
	)


@router.get(
	'/pairs/available',
	response_model=PairsResponse,
	status_code=status.HTTP_200_OK,
	summary='List currency pairs that can be quoted',
)
async def get_available_pairs() -> PairsResponse:
	return PairsResponse(data=PairsData(pairs=list(SUPPORTED_PAIRS), timestamp=datetime.now(tz=UTC)))


@router.get(
	'/{pair}',
	response_model=PriceResponse,
	status_code=status.HTTP_200_OK,
	summary='Live Zodia price for one pair',
)
async def get_price(
	pair: Annotated[str, Path(min_length=3, max_length=20)],
	source: Annotated[ZodiaQuoteSource, Depends(get_zodia_source)],
	trade_type: Annotated[str, Query(alias='type', description='buy or sell')] = 'buy',
) -> PriceResponse:
	direction = TradeDirection.parse(trade_type)
	logger.info(f'Fetching {direction.value} price for {pair} from {source.name}')

	quote = await source.fetch_quote(pair)
	return PriceResponse(
		data=PriceData(
			provider=quote.provider,
			currency_pair=quote.currency_pair,
			type=direction,
			rate=direction.rate_of(quote),
			timestamp=quote.observed_at,
		)
	)


@router.get(
	'/{pair}/compare',
	response_model=ComparisonResponse,
	status_code=status.HTTP_200_OK,
	summary='Compare one pair across all providers',
)
async def compare_prices(
	pair: Annotated[str, Path(min_length=3, max_length=20)],
	service: Annotated[RateService, Depends(get_rate_service)],
	trade_type: Annotated[str, Query(alias='type', description='buy or sell')] = 'buy',
) -> ComparisonResponse:
	direction = TradeDirection.parse(trade_type)
	logger.info(f'Comparing {direction.value} prices for {pair} across providers')

	result = await service.compare(pair, direction)
	return ComparisonResponse(
		data=ComparisonData(
			currency_pair=result.requested_pair,
			type=direction,
			providers=[_provider_rate(q, direction) for q in result.quotes],
			best_provider=_provider_rate(result.best_quote, direction) if result.best_quote else None,
			timestamp=result.aggregated_at,
		)
	)
