import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_providers, get_zodia_source
from api.schemas import HealthResponse, Instrument, InstrumentsData, InstrumentsResponse, ProviderStatus
from domain.exceptions.quote import ProviderUnavailable
from domain.models.market import FALLBACK_INSTRUMENTS
from domain.models.quote import ProviderConfig
from infrastructure.providers import ZodiaQuoteSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api', tags=['health'])


@router.get(
	'/health',
	response_model=HealthResponse,
	status_code=status.HTTP_200_OK,
	summary='Service health and provider configuration',
)
async def health_check(
	providers: Annotated[list[ProviderConfig], Depends(get_providers)],
) -> HealthResponse:
	return HealthResponse(
		status='healthy',
		timestamp=datetime.now(tz=UTC),
		providers=[ProviderStatus(name=p.name, enabled=p.enabled) for p in providers],
	)


@router.get(
	'/instruments',
	response_model=InstrumentsResponse,
	status_code=status.HTTP_200_OK,
	summary='Instruments tradable upstream',
)
async def get_instruments(
	source: Annotated[ZodiaQuoteSource, Depends(get_zodia_source)],
) -> InstrumentsResponse:
	try:
		raw = await source.fetch_instruments()
		instruments = [
			Instrument(
				instrument=str(item.get('instrument')),
				active=bool(item.get('active', True)),
				enabled=bool(item.get('enabled', True)),
			)
			for item in raw
			if isinstance(item, dict) and item.get('instrument')
		]
		return InstrumentsResponse(data=InstrumentsData(instruments=instruments))
	except ProviderUnavailable as e:
		logger.error(f'Failed to get available instruments: {e}')
		return InstrumentsResponse(
			data=InstrumentsData(instruments=[Instrument(instrument=name) for name in FALLBACK_INSTRUMENTS]),
			note='Using fallback instruments due to API error',
		)
