from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_account_service
from api.schemas import AccountResponse, TransferRequest, TransferResponse
from application.services import AccountService

router = APIRouter(prefix='/api', tags=['account'])


@router.get(
	'/account',
	response_model=AccountResponse,
	status_code=status.HTTP_200_OK,
	summary='Account balances',
)
async def get_account(service: Annotated[AccountService, Depends(get_account_service)]) -> AccountResponse:
	return AccountResponse.from_lookup(await service.account())


@router.get(
	'/limits',
	response_model=AccountResponse,
	status_code=status.HTTP_200_OK,
	summary='Trading limits',
)
async def get_limits(service: Annotated[AccountService, Depends(get_account_service)]) -> AccountResponse:
	return AccountResponse.from_lookup(await service.limits())


@router.get(
	'/transactions',
	response_model=AccountResponse,
	status_code=status.HTTP_200_OK,
	summary='Transaction history',
)
async def get_transactions(
	service: Annotated[AccountService, Depends(get_account_service)],
	ccy: str | None = None,
	transaction_state: Annotated[str | None, Query(alias='transactionState')] = None,
	from_ts: Annotated[int | None, Query(alias='from')] = None,
	to_ts: Annotated[int | None, Query(alias='to')] = None,
	max_results: Annotated[int, Query(alias='max', ge=1, le=500)] = 50,
	offset: Annotated[int, Query(ge=0)] = 0,
	transaction_class: Annotated[str | None, Query(alias='transactionClass')] = None,
	transaction_type: Annotated[str | None, Query(alias='transactionType')] = None,
) -> AccountResponse:
	lookup = await service.transactions(
		ccy=ccy,
		transaction_state=transaction_state,
		from_ts=from_ts,
		to_ts=to_ts,
		max_results=max_results,
		offset=offset,
		transaction_class=transaction_class,
		transaction_type=transaction_type,
	)
	return AccountResponse.from_lookup(lookup)


@router.get(
	'/transfers',
	response_model=AccountResponse,
	status_code=status.HTTP_200_OK,
	summary='Transfer history',
)
async def get_transfers(
	service: Annotated[AccountService, Depends(get_account_service)],
	ccy: str | None = None,
	from_ts: Annotated[int | None, Query(alias='from')] = None,
	to_ts: Annotated[int | None, Query(alias='to')] = None,
) -> AccountResponse:
	return AccountResponse.from_lookup(await service.transfers(ccy=ccy, from_ts=from_ts, to_ts=to_ts))


@router.post(
	'/transfer',
	response_model=TransferResponse,
	status_code=status.HTTP_200_OK,
	summary='Move funds between account groups',
)
async def execute_transfer(
	request: TransferRequest,
	service: Annotated[AccountService, Depends(get_account_service)],
) -> TransferResponse:
	result = await service.transfer(
		from_account=request.from_account,
		to_account=request.to_account,
		amount=request.amount,
		ccy=request.ccy,
		account_group_uuid=request.account_group_uuid,
	)
	return TransferResponse(data=result)
