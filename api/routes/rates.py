from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_order_service, get_rate_service
from api.schemas import BestProviderData, BestProviderResponse, QuoteResponse, RatesData, RatesResponse
from application.services import OrderService, RateService
from config.settings import get_settings
from domain.models.quote import TradeDirection

router = APIRouter(prefix='/api', tags=['rates'])


@router.get(
	'/rates',
	response_model=RatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Fetch quotes from every provider and pick the best one',
)
async def get_rates(
	service: Annotated[RateService, Depends(get_rate_service)],
	pair: Annotated[str | None, Query(min_length=3, max_length=20)] = None,
	trade_type: Annotated[str, Query(alias='type', description='buy or sell')] = 'buy',
) -> RatesResponse:
	direction = TradeDirection.parse(trade_type)
	currency_pair = pair or get_settings().DEFAULT_PAIR

	result = await service.aggregate(currency_pair, direction)
	return RatesResponse(data=RatesData.from_result(result))


@router.get(
	'/best',
	response_model=BestProviderResponse,
	status_code=status.HTTP_200_OK,
	summary='Best quote from the most recent aggregation',
)
async def get_best_provider(
	service: Annotated[OrderService, Depends(get_order_service)],
	trade_type: Annotated[str, Query(alias='type', description='buy or sell')] = 'buy',
) -> BestProviderResponse:
	direction = TradeDirection.parse(trade_type)
	best = service.current_best(direction)
	return BestProviderResponse(
		data=BestProviderData(
			best_provider=QuoteResponse.from_quote(best),
			type=direction,
			timestamp=datetime.now(tz=UTC),
		)
	)
