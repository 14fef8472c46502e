from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_coin_service
from api.schemas import CoinData, CoinsData, CoinsResponse
from application.services import CoinService

router = APIRouter(prefix='/api', tags=['coins'])


@router.get(
	'/coins',
	response_model=CoinsResponse,
	status_code=status.HTTP_200_OK,
	summary='Coin prices from each selected provider',
)
async def get_coins(
	service: Annotated[CoinService, Depends(get_coin_service)],
	providers: Annotated[str, Query(description='Comma separated provider names')] = 'Zodia,TransFi,Ramp',
	asset_type: Annotated[str, Query(alias='assetType', description='all, stablecoin or crypto')] = 'all',
) -> CoinsResponse:
	selected = [name.strip() for name in providers.split(',') if name.strip()]
	listings = service.list_coins(selected, asset_type)
	return CoinsResponse(
		data=CoinsData(
			coins=[CoinData.from_listing(listing) for listing in listings],
			providers=selected,
			asset_type=asset_type,
			total_coins=len(listings),
			timestamp=datetime.now(tz=UTC),
		)
	)
