from exchangerates.domain.exceptions.currency import (
	ConversionError,
	CurrencyError,
	ExchangeRatesError,
	InvalidAmount,
	InvalidCurrencyFormat,
	InvalidDateFormat,
	InvalidRounding,
	MalformedResponse,
	ProviderError,
	RequestFailed,
	UnsupportedCurrency,
)
from exchangerates.domain.models.currency import SUPPORTED_CURRENCIES
from exchangerates.infrastructure.providers import ExchangeRatesAPI, HistoricalRateResponse, RateResponse
from exchangerates.monitoring.logger import configure_logging

__version__ = '1.0.0'

__all__ = [
	'SUPPORTED_CURRENCIES',
	'ConversionError',
	'CurrencyError',
	'ExchangeRatesAPI',
	'ExchangeRatesError',
	'HistoricalRateResponse',
	'InvalidAmount',
	'InvalidCurrencyFormat',
	'InvalidDateFormat',
	'InvalidRounding',
	'MalformedResponse',
	'ProviderError',
	'RateResponse',
	'RequestFailed',
	'UnsupportedCurrency',
	'configure_logging',
]
