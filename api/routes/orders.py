from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_order_service
from api.schemas import OrderData, OrderRequest, OrderResponse
from application.services import OrderService

router = APIRouter(prefix='/api', tags=['orders'])


@router.post(
	'/order',
	response_model=OrderResponse,
	status_code=status.HTTP_200_OK,
	summary='Acknowledge an order against the current best provider',
)
async def place_order(
	request: OrderRequest,
	service: Annotated[OrderService, Depends(get_order_service)],
) -> OrderResponse:
	ack = service.place_order(
		provider=request.provider,
		amount=request.amount,
		currency=request.currency,
		side=request.side,
	)
	return OrderResponse(data=OrderData.from_ack(ack))
