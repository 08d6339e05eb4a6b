from decimal import ROUND_HALF_UP, Decimal, getcontext, localcontext

from exchangerates.domain.exceptions.currency import InvalidAmount, InvalidRounding
from exchangerates.domain.models.currency import ERROR_MESSAGES


def validate_amount(amount) -> Decimal:
	if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
		raise InvalidAmount(ERROR_MESSAGES['format.invalid_amount'])
	value = Decimal(str(amount))
	if not value.is_finite():
		raise InvalidAmount(ERROR_MESSAGES['format.invalid_amount'])
	return value


def validate_rounding(rounding) -> int:
	if isinstance(rounding, bool) or not isinstance(rounding, (int, float)):
		raise InvalidRounding(ERROR_MESSAGES['format.invalid_rounding'])
	if isinstance(rounding, float) and not rounding.is_integer():
		raise InvalidRounding(ERROR_MESSAGES['format.invalid_rounding'])
	return int(rounding)


def convert_amount(amount, rate: float, rounding: int = 2) -> float:
	"""Multiply ``amount`` by ``rate`` and round half away from zero.

	Works in Decimal so that values such as 1.005 round the way they read
	rather than the way their binary float representation does. A negative
	``rounding`` rounds to tens, hundreds and so on.
	"""
	digits = validate_rounding(rounding)
	with localcontext() as ctx:
		# The product is exact, however many digits the operands carry.
		ctx.prec = getcontext().prec + len(str(amount)) + len(str(rate))
		value = validate_amount(amount) * Decimal(str(rate))

		# Already no finer than the requested precision: nothing to round.
		if digits >= -value.as_tuple().exponent:
			return float(value)

		ctx.prec = max(ctx.prec, value.adjusted() + digits + 2)
		exponent = Decimal(1).scaleb(-digits)
		return float(value.quantize(exponent, rounding=ROUND_HALF_UP))
