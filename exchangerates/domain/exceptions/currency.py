class ExchangeRatesError(Exception):
	pass


class CurrencyError(ExchangeRatesError):
	pass


class InvalidCurrencyFormat(CurrencyError):
	pass


class UnsupportedCurrency(CurrencyError):
	pass


class InvalidDateFormat(ExchangeRatesError):
	pass


class ConversionError(ExchangeRatesError):
	pass


class InvalidAmount(ConversionError):
	pass


class InvalidRounding(ConversionError):
	pass


class ProviderError(ExchangeRatesError):
	pass


class RequestFailed(ProviderError):
	pass


class MalformedResponse(ProviderError):
	pass
