import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from decimal import Decimal

from domain.exceptions.quote import InvalidTransfer, ProviderUnavailable, TransferFailed
from domain.models.account import (
	FALLBACK_ACCOUNT,
	FALLBACK_LIMITS,
	FALLBACK_NOTE,
	TRANSFER_FIELDS,
	fallback_transactions,
	fallback_transfers,
)
from infrastructure.providers import ZodiaQuoteSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountLookup:
	data: dict
	note: str | None = None


class AccountService:
	"""
	Account passthroughs to Zodia.

	Read endpoints never fail: when the upstream call is refused or unreachable
	they answer with fixed sample data and a ``note`` saying so. Transfers are
	never faked.
	"""

	def __init__(self, source: ZodiaQuoteSource):
		self.source = source

	async def _lookup(self, what: str, call: Callable[[], Awaitable[dict]], fallback: Callable[[], dict]) -> AccountLookup:
		logger.info(f'Fetching {what} from Zodia...')
		try:
			data = await call()
		except ProviderUnavailable as e:
			logger.error(f'Failed to get {what}: {e}')
			return AccountLookup(data=fallback(), note=FALLBACK_NOTE)
		logger.info(f'{what.capitalize()} fetched successfully')
		return AccountLookup(data=data)

	async def account(self) -> AccountLookup:
		return await self._lookup('account information', self.source.fetch_account, lambda: FALLBACK_ACCOUNT)

	async def limits(self) -> AccountLookup:
		return await self._lookup('trading limits', self.source.fetch_limits, lambda: FALLBACK_LIMITS)

	async def transactions(
		self,
		ccy: str | None = None,
		transaction_state: str | None = None,
		from_ts: int | None = None,
		to_ts: int | None = None,
		max_results: int = 50,
		offset: int = 0,
		transaction_class: str | None = None,
		transaction_type: str | None = None,
	) -> AccountLookup:
		filters = {
			'ccy': ccy,
			'transactionState': transaction_state,
			'from': from_ts,
			'to': to_ts,
			'max': max_results,
			'offset': offset,
			'transactionClass': transaction_class,
			'transactionType': transaction_type,
		}
		return await self._lookup(
			'transaction history', lambda: self.source.fetch_transactions(**filters), fallback_transactions
		)

	async def transfers(self, ccy: str | None = None, from_ts: int | None = None, to_ts: int | None = None) -> AccountLookup:
		filters = {'ccy': ccy, 'from': from_ts, 'to': to_ts}
		return await self._lookup('transfer history', lambda: self.source.fetch_transfers(**filters), fallback_transfers)

	async def transfer(
		self,
		from_account: str | None,
		to_account: str | None,
		amount: Decimal | None,
		ccy: str | None,
		account_group_uuid: str | None,
	) -> dict:
		values = (from_account, to_account, amount, ccy, account_group_uuid)
		if not all(values):
			raise InvalidTransfer(f'Missing required parameters: {", ".join(TRANSFER_FIELDS)}')

		logger.info(f'Executing transfer: {amount} {ccy} from {from_account} to {to_account}')
		try:
			result = await self.source.execute_transfer(from_account, to_account, amount, ccy, account_group_uuid)
		except ProviderUnavailable as e:
			logger.error(f'Failed to execute transfer: {e}')
			raise TransferFailed(e.reason) from e

		logger.info('Transfer executed successfully')
		return result
