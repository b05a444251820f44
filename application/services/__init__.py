from .currency_service import CurrencyService
from .rate_service import RateService

__all__ = ['CurrencyService', 'RateService']
