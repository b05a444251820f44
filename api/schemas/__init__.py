from .requests import CurrencyCreateRequest, CurrencyReplaceRequest, CurrencyUpdateRequest
from .responses import CurrencyResponse, NormalizedRatesResponse, RateEntryResponse

__all__ = [
	'CurrencyCreateRequest',
	'CurrencyReplaceRequest',
	'CurrencyUpdateRequest',
	'CurrencyResponse',
	'NormalizedRatesResponse',
	'RateEntryResponse',
]
