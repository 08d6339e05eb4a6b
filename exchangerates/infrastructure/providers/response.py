import json
from datetime import UTC, datetime

import httpx
from pydantic import BaseModel, ValidationError

from exchangerates.application.services.currency_service import sanitize_currency_code
from exchangerates.domain.exceptions.currency import MalformedResponse
from exchangerates.domain.models.rates import HistoricalRatesPayload, RatesPayload


class RateResponse:
	"""Read-only view over a completed rates API response.

	The body is parsed once, at construction, into a typed payload; the
	timestamp records when that happened, not when the request was sent.
	"""

	payload_model: type[BaseModel] = RatesPayload

	def __init__(self, response: httpx.Response):
		self._response = response
		self._status_code = response.status_code
		self._headers = _collect_headers(response.headers)
		self._body = response.content
		self._timestamp = datetime.now(UTC).isoformat(timespec='seconds')
		self._payload = self._parse_payload(self._body)

	def _parse_payload(self, body: bytes):
		try:
			return self.payload_model.model_validate_json(body)
		except ValidationError as e:
			raise MalformedResponse(f'Unexpected response body from rates API: {e}') from e

	@property
	def response(self) -> httpx.Response:
		return self._response

	@property
	def status_code(self) -> int:
		return self._status_code

	@property
	def headers(self) -> dict[str, list[str]]:
		return {name: list(values) for name, values in self._headers.items()}

	@property
	def body(self) -> bytes:
		return self._body

	@property
	def timestamp(self) -> str:
		return self._timestamp

	@property
	def base_currency(self) -> str:
		return self._payload.base

	@property
	def date(self) -> str | None:
		return self._payload.date

	@property
	def rates(self) -> dict[str, float]:
		return dict(self._payload.rates)

	def get_rate(self, code: str | None = None) -> float | None:
		"""Soft lookup of a single rate.

		With no ``code`` and exactly one rate in the response, that rate is
		returned. This is a shortcut for single-currency requests only; in every
		other case a missing code yields None rather than an error.
		"""
		return _lookup(self._payload.rates, code)

	def to_dict(self) -> dict:
		return {
			'statusCode': self.status_code,
			'timestamp': self.timestamp,
			'baseCurrency': self.base_currency,
			'rates': self.rates,
		}

	def to_json(self) -> str:
		return json.dumps(self.to_dict())

	def __repr__(self) -> str:
		return f'{type(self).__name__}(status_code={self.status_code}, base_currency={self.base_currency!r})'


class HistoricalRateResponse(RateResponse):
	"""Response of the ``history`` endpoint: rates are grouped by date."""

	payload_model = HistoricalRatesPayload

	@property
	def date(self) -> str | None:
		return self.end_at

	@property
	def start_at(self) -> str | None:
		return self._payload.start_at

	@property
	def end_at(self) -> str | None:
		return self._payload.end_at

	@property
	def dates(self) -> list[str]:
		return sorted(self._payload.rates)

	@property
	def rates(self) -> dict[str, dict[str, float]]:
		return {day: dict(rates) for day, rates in self._payload.rates.items()}

	def get_rates_on(self, date: str) -> dict[str, float]:
		return dict(self._payload.rates.get(date, {}))

	def get_rate(self, code: str | None = None, on: str | None = None) -> float | None:
		"""Soft lookup within one day of the series, the latest day by default."""
		if on is None:
			dates = self.dates
			if not dates:
				return None
			on = dates[-1]
		return _lookup(self._payload.rates.get(on, {}), code)


def _lookup(rates: dict[str, float], code: str | None) -> float | None:
	if code is None:
		if len(rates) == 1:
			return next(iter(rates.values()))
		return None
	if not isinstance(code, str):
		return None
	return rates.get(sanitize_currency_code(code))


def _collect_headers(headers: httpx.Headers) -> dict[str, list[str]]:
	collected: dict[str, list[str]] = {}
	for name, value in headers.multi_items():
		collected.setdefault(name, []).append(value)
	return collected
