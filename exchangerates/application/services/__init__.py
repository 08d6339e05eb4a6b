from .conversion_service import convert_amount, validate_amount, validate_rounding
from .currency_service import (
	currency_is_supported,
	sanitize_currency_code,
	validate_currency_format,
	validate_date,
	verify_currency_code,
)

__all__ = [
	'convert_amount',
	'currency_is_supported',
	'sanitize_currency_code',
	'validate_amount',
	'validate_currency_format',
	'validate_date',
	'validate_rounding',
	'verify_currency_code',
]
