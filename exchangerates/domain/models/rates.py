from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class RateQuery:
	"""Endpoint and query parameters for a single GET against the rates API."""

	endpoint: str
	params: dict[str, str] = field(default_factory=dict)


class RatesPayload(BaseModel):
	model_config = ConfigDict(extra='ignore', frozen=True)

	base: str = Field(..., description='Base currency the rates are quoted against')
	rates: dict[str, float] = Field(..., description='Currency code to rate')
	date: str | None = Field(default=None, description='Date the rates apply to')


class HistoricalRatesPayload(BaseModel):
	model_config = ConfigDict(extra='ignore', frozen=True)

	base: str = Field(..., description='Base currency the rates are quoted against')
	rates: dict[str, dict[str, float]] = Field(..., description='Date to (currency code to rate)')
	start_at: str | None = Field(default=None, description='First date of the series')
	end_at: str | None = Field(default=None, description='Last date of the series')
