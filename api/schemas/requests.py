from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class OrderRequest(BaseModel):
	provider: str = Field(default='Zodia', min_length=1)
	amount: Decimal = Field(..., gt=0)
	currency: str = Field(default='USDT', min_length=2, max_length=10)
	side: str = Field(default='buy', description='buy or sell')

	@field_validator('currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()

	class ConfigDict:
		json_schema_extra = {
			'example': {'provider': 'Zodia', 'amount': 100, 'currency': 'USDT', 'side': 'buy'}
		}


class TransferRequest(BaseModel):
	from_account: str | None = Field(default=None, alias='from')
	to_account: str | None = Field(default=None, alias='to')
	amount: Decimal | None = None
	ccy: str | None = None
	account_group_uuid: str | None = Field(default=None, alias='accountGroupUuid')
