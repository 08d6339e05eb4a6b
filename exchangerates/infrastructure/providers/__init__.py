from .exchangerates import ExchangeRatesAPI
from .response import HistoricalRateResponse, RateResponse

__all__ = ['ExchangeRatesAPI', 'HistoricalRateResponse', 'RateResponse']
