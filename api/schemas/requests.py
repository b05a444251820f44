from pydantic import BaseModel, ConfigDict, Field

from domain.models.patch import UNSET, CurrencyPatch


class CurrencyCreateRequest(BaseModel):
	code: str = Field(..., min_length=3, max_length=10)
	display_name: str = Field(..., min_length=1, max_length=50)
	symbol: str | None = Field(default=None, max_length=10)

	model_config = ConfigDict(
		json_schema_extra={'example': {'code': 'USD', 'display_name': 'US Dollar', 'symbol': '$'}}
	)


class CurrencyReplaceRequest(BaseModel):
	# Full replacement: every field must be sent; symbol may be null.
	code: str = Field(..., min_length=3, max_length=10)
	display_name: str = Field(..., min_length=1, max_length=50)
	symbol: str | None = Field(..., max_length=10)


class CurrencyUpdateRequest(BaseModel):
	"""Partial update body.

	Omitting a key leaves the field untouched; sending ``"symbol": null``
	clears the symbol. Field rules are enforced by the service, so none are
	declared here.
	"""

	display_name: str | None = None
	symbol: str | None = None

	model_config = ConfigDict(json_schema_extra={'example': {'symbol': None}})

	def to_patch(self) -> CurrencyPatch:
		provided = self.model_fields_set
		return CurrencyPatch(
			display_name=self.display_name if 'display_name' in provided else UNSET,
			symbol=self.symbol if 'symbol' in provided else UNSET,
		)
