import json
import logging
from collections.abc import Iterable
from typing import Any

import httpx

from exchangerates.application.services.conversion_service import (
	convert_amount,
	validate_amount,
	validate_rounding,
)
from exchangerates.application.services.currency_service import (
	currency_is_supported,
	validate_date,
	verify_currency_code,
)
from exchangerates.config.settings import Settings, get_settings
from exchangerates.domain.exceptions.currency import MalformedResponse, RequestFailed
from exchangerates.domain.models.currency import DEFAULT_BASE_CURRENCY, SUPPORTED_CURRENCIES
from exchangerates.domain.models.rates import RateQuery

from .response import HistoricalRateResponse, RateResponse

logger = logging.getLogger(__name__)

HISTORY_ENDPOINT = 'history'
LATEST_ENDPOINT = 'latest'


class ExchangeRatesAPI:
	"""Fluent request builder for the exchangerate.host rates API.

	Every mutator validates its input immediately and returns the builder, so
	calls can be chained::

		rate = ExchangeRatesAPI(access_key).set_base_currency('USD').add_rate('GBP').fetch().get_rate()

	The request itself is only assembled and sent by ``fetch`` or ``convert``.
	"""

	def __init__(
		self,
		access_key: str | None = None,
		use_ssl: bool = True,
		client: httpx.Client | None = None,
		settings: Settings | None = None,
	):
		self._settings = settings or get_settings()
		self._access_key: str | None = None
		self._api_url = self._settings.API_URL_SSL
		self._fetch_date: str | None = None
		self._date_from: str | None = None
		self._date_to: str | None = None
		self._base_currency: str | None = None
		self._rates: list[str] = []

		self._owns_client = client is None
		self._client = client or httpx.Client(
			timeout=httpx.Timeout(self._settings.TIMEOUT),
			headers={'accept': 'application/json'},
		)

		self.set_access_key(access_key)
		self.set_use_ssl(use_ssl)

	# Getters

	@property
	def api_url(self) -> str:
		return self._api_url

	def get_fetch_date(self) -> str | None:
		return self._fetch_date

	def get_date_from(self) -> str | None:
		return self._date_from

	def get_date_to(self) -> str | None:
		return self._date_to

	def get_supported_currencies(self, concat: str | None = None) -> list[str] | str:
		if concat is None:
			return list(SUPPORTED_CURRENCIES)
		return concat.join(SUPPORTED_CURRENCIES)

	def get_base_currency(self) -> str:
		return self._base_currency or DEFAULT_BASE_CURRENCY

	def get_rates(self, concat: str | None = None) -> list[str] | str:
		if concat is None:
			return list(self._rates)
		return concat.join(self._rates)

	def get_access_key(self) -> str | None:
		return self._access_key

	def get_use_ssl(self) -> bool:
		return self._api_url == self._settings.API_URL_SSL

	# Setters

	def set_access_key(self, access_key: str | None = None) -> 'ExchangeRatesAPI':
		self._access_key = access_key
		return self

	def set_use_ssl(self, use_ssl: bool = True) -> 'ExchangeRatesAPI':
		if use_ssl:
			self._api_url = self._settings.API_URL_SSL
		else:
			self._api_url = self._settings.API_URL_NON_SSL
		return self

	def set_base_currency(self, currency: str) -> 'ExchangeRatesAPI':
		self._base_currency = verify_currency_code(currency)
		return self

	def set_fetch_date(self, date: str) -> 'ExchangeRatesAPI':
		self._fetch_date = validate_date(date)
		return self

	def add_date_from(self, date: str) -> 'ExchangeRatesAPI':
		self._date_from = validate_date(date)
		return self

	def remove_date_from(self) -> 'ExchangeRatesAPI':
		self._date_from = None
		return self

	def add_date_to(self, date: str) -> 'ExchangeRatesAPI':
		self._date_to = validate_date(date)
		return self

	def remove_date_to(self) -> 'ExchangeRatesAPI':
		self._date_to = None
		return self

	def add_rate(self, currency: str) -> 'ExchangeRatesAPI':
		self._rates.append(verify_currency_code(currency))
		return self

	def add_rates(self, currencies: Iterable[str]) -> 'ExchangeRatesAPI':
		for currency in currencies:
			self.add_rate(currency)
		return self

	def remove_rate(self, currency: str) -> 'ExchangeRatesAPI':
		currency_code = verify_currency_code(currency)
		self._rates = [rate for rate in self._rates if rate != currency_code]
		return self

	def remove_rates(self, currencies: Iterable[str]) -> 'ExchangeRatesAPI':
		for currency in currencies:
			self.remove_rate(currency)
		return self

	def currency_is_supported(self, currency: str) -> bool:
		return currency_is_supported(currency)

	# Requests

	def build_query(self) -> RateQuery:
		"""Pick the endpoint and collect the query parameters that are set."""
		if self._date_from is not None:
			endpoint = HISTORY_ENDPOINT
		else:
			endpoint = self._fetch_date or LATEST_ENDPOINT

		params: dict[str, str] = {}
		if self._access_key is not None:
			params['access_key'] = self._access_key
		if self._date_from is not None:
			params['start_at'] = self._date_from
		if self._date_to is not None:
			params['end_at'] = self._date_to
		params['base'] = self.get_base_currency()
		if self._rates:
			params['symbols'] = self.get_rates(',')

		return RateQuery(endpoint=endpoint, params=params)

	def fetch(self, return_raw: bool = False, parse_json: bool = True) -> RateResponse | str | dict[str, Any]:
		"""Send the configured request.

		Returns a ``RateResponse`` (``HistoricalRateResponse`` for date
		ranges). With ``return_raw`` the normalised JSON document is returned
		instead, as a string when ``parse_json`` is False and as a dict
		otherwise.
		"""
		query = self.build_query()
		url = f'{self._api_url.rstrip("/")}/{query.endpoint}'
		logger.debug(f'GET {url} params={_masked(query.params)}')

		try:
			response = self._client.get(url, params=query.params)
			response.raise_for_status()
		except httpx.HTTPStatusError as e:
			logger.error(f'Rates API returned HTTP {e.response.status_code} for {query.endpoint}')
			raise RequestFailed(
				f'HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			logger.error(f'Rates API request to {query.endpoint} failed: {e}')
			raise RequestFailed(f'Request failed: {e.__class__.__name__}: {e}') from e

		response_class = HistoricalRateResponse if query.endpoint == HISTORY_ENDPOINT else RateResponse
		result = response_class(response)

		if not return_raw:
			return result
		if not parse_json:
			return result.to_json()
		return json.loads(result.to_json())

	def convert(self, to_currency: str, amount, rounding: int = 2) -> float:
		"""Convert ``amount`` of the base currency into ``to_currency``.

		``to_currency`` stays in the builder's target list afterwards.
		"""
		currency_code = verify_currency_code(to_currency)
		validate_amount(amount)
		validate_rounding(rounding)

		response = self.add_rate(currency_code).fetch()
		rate = response.get_rate(currency_code)
		if rate is None:
			raise MalformedResponse(f'Missing rate for {currency_code}')

		return convert_amount(amount, rate, rounding)

	def close(self) -> None:
		"""Close the HTTP client if this builder created it."""
		if self._owns_client:
			self._client.close()

	def __enter__(self) -> 'ExchangeRatesAPI':
		return self

	def __exit__(self, *exc_info) -> None:
		self.close()


def _masked(params: dict[str, str]) -> dict[str, str]:
	if 'access_key' not in params:
		return params
	return {**params, 'access_key': '***'}
