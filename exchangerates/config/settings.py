import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	API_URL_SSL: str = 'https://api.exchangerate.host'
	API_URL_NON_SSL: str = 'http://api.exchangerate.host'

	# Transport
	TIMEOUT: float = 10.0

	LOG_LEVEL: str = 'INFO'

	# Only EXCHANGERATES_* environment variables apply; pass _env_file to read a dotenv file.
	model_config = SettingsConfigDict(
		env_prefix='EXCHANGERATES_', env_file=None, case_sensitive=False, extra='ignore'
	)

	@field_validator('LOG_LEVEL')
	@classmethod
	def check_log_level(cls, value: str) -> str:
		level_name = value.strip().upper()
		if level_name not in logging.getLevelNamesMapping():
			raise ValueError(f'Unknown log level {value!r}')
		return level_name


@lru_cache
def get_settings() -> Settings:
	return Settings()
