import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.quote import (
	InvalidDirection,
	InvalidTransfer,
	NoQuotesAvailable,
	OrderRejected,
	ProviderUnavailable,
	TransferFailed,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidDirection)
	async def invalid_direction_handler(request: Request, exc: InvalidDirection):
		return JSONResponse(
			status_code=400, content={'success': False, 'error': 'Invalid trade direction', 'message': str(exc)}
		)

	@app.exception_handler(NoQuotesAvailable)
	async def no_quotes_handler(request: Request, exc: NoQuotesAvailable):
		return JSONResponse(status_code=404, content={'success': False, 'error': str(exc)})

	@app.exception_handler(OrderRejected)
	async def order_rejected_handler(request: Request, exc: OrderRejected):
		return JSONResponse(status_code=400, content={'success': False, 'error': str(exc)})

	@app.exception_handler(ProviderUnavailable)
	async def provider_unavailable_handler(request: Request, exc: ProviderUnavailable):
		logger.error(f'Provider error: {exc}')
		return JSONResponse(
			status_code=503,
			content={'success': False, 'error': f'Failed to fetch {exc.provider} price', 'message': exc.reason},
		)

	@app.exception_handler(InvalidTransfer)
	async def invalid_transfer_handler(request: Request, exc: InvalidTransfer):
		return JSONResponse(status_code=400, content={'success': False, 'error': str(exc)})

	@app.exception_handler(TransferFailed)
	async def transfer_failed_handler(request: Request, exc: TransferFailed):
		return JSONResponse(
			status_code=500, content={'success': False, 'error': 'Failed to execute transfer', 'message': str(exc)}
		)

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return JSONResponse(status_code=500, content={'success': False, 'error': 'Internal server error'})
