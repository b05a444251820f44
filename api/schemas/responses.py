from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from domain.models.currency import Currency, NormalizedRates


class CurrencyResponse(BaseModel):
	code: str = Field(..., description='Currency code, e.g. USD')
	display_name: str = Field(..., description='Display name of the currency')
	symbol: str | None = Field(None, description='Currency symbol, e.g. $')
	is_active: bool = Field(..., description='False once the currency is soft-deleted')
	created_at: datetime
	updated_at: datetime

	@classmethod
	def from_domain(cls, currency: Currency) -> 'CurrencyResponse':
		return cls(
			code=currency.code,
			display_name=currency.display_name,
			symbol=currency.symbol,
			is_active=currency.is_active,
			created_at=currency.created_at,
			updated_at=currency.updated_at,
		)


class RateEntryResponse(BaseModel):
	code: str = Field(..., description='Currency code')
	display_name: str = Field(..., description='Stored display name, or N/A')
	rate: float = Field(..., description='Rate from the upstream feed')


class NormalizedRatesResponse(BaseModel):
	formatted_update_time: str = Field(..., description='Update time as yyyy/MM/dd HH:mm:ss')
	entries: list[RateEntryResponse]

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'formatted_update_time': '2024/09/02 07:07:20',
				'entries': [{'code': 'USD', 'display_name': 'US Dollar', 'rate': 57756.2984}],
			}
		}
	)

	@classmethod
	def from_domain(cls, rates: NormalizedRates) -> 'NormalizedRatesResponse':
		return cls(
			formatted_update_time=rates.formatted_update_time,
			entries=[
				RateEntryResponse(code=e.code, display_name=e.display_name, rate=e.rate)
				for e in rates.entries
			],
		)
