import logging

from exchangerates.domain.exceptions.currency import (
	InvalidCurrencyFormat,
	InvalidDateFormat,
	UnsupportedCurrency,
)
from exchangerates.domain.models.currency import (
	CURRENCY_REGEX,
	DATE_REGEX,
	ERROR_MESSAGES,
	SUPPORTED_CURRENCIES,
)

logger = logging.getLogger(__name__)

_SUPPORTED = frozenset(SUPPORTED_CURRENCIES)


def sanitize_currency_code(code: str) -> str:
	return code.strip().upper()


def validate_currency_format(code: str) -> str:
	"""Sanitize ``code`` and check it is three letters, returning the normalised code."""
	if not isinstance(code, str):
		raise InvalidCurrencyFormat(
			ERROR_MESSAGES['format.invalid_currency_code'].format(code=code)
		)
	currency_code = sanitize_currency_code(code)
	if len(currency_code) != 3 or not CURRENCY_REGEX.fullmatch(currency_code):
		raise InvalidCurrencyFormat(
			ERROR_MESSAGES['format.invalid_currency_code'].format(code=currency_code)
		)
	return currency_code


def currency_is_supported(code: str) -> bool:
	"""Membership test against the static currency table.

	Malformed codes still raise ``InvalidCurrencyFormat``; an unknown but
	well-formed code simply returns False.
	"""
	return validate_currency_format(code) in _SUPPORTED


def verify_currency_code(code: str) -> str:
	currency_code = validate_currency_format(code)
	if currency_code not in _SUPPORTED:
		logger.debug(f'Rejected unsupported currency {currency_code}')
		raise UnsupportedCurrency(
			ERROR_MESSAGES['format.unsupported_currency'].format(code=currency_code)
		)
	return currency_code


def validate_date(date: str) -> str:
	# Day bounds are 01-31 for every month; calendar validity is not checked.
	if not isinstance(date, str) or not DATE_REGEX.fullmatch(date):
		raise InvalidDateFormat(ERROR_MESSAGES['format.invalid_date'])
	return date
