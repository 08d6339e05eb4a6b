# nosec B101


import pytest
from pydantic import ValidationError

from exchangerates.config.settings import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.API_URL_SSL == 'https://api.exchangerate.host'
    assert settings.API_URL_NON_SSL == 'http://api.exchangerate.host'
    assert settings.TIMEOUT == 10.0
    assert settings.LOG_LEVEL == 'INFO'


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('EXCHANGERATES_TIMEOUT', '3.5')
    monkeypatch.setenv('EXCHANGERATES_API_URL_SSL', 'https://rates.example.test')

    settings = Settings(_env_file=None)

    assert settings.TIMEOUT == 3.5
    assert settings.API_URL_SSL == 'https://rates.example.test'


def test_env_file(tmp_path):
    env_file = tmp_path / '.env'
    env_file.write_text('EXCHANGERATES_LOG_LEVEL=DEBUG\n')

    assert Settings(_env_file=env_file).LOG_LEVEL == 'DEBUG'


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_builder_uses_configured_urls(mock_http_client):
    from exchangerates.infrastructure.providers import ExchangeRatesAPI

    settings = Settings(
        _env_file=None,
        API_URL_SSL='https://secure.example.test',
        API_URL_NON_SSL='http://plain.example.test',
    )
    api = ExchangeRatesAPI(client=mock_http_client, settings=settings)

    api.fetch()
    assert mock_http_client.get.call_args[0][0] == 'https://secure.example.test/latest'

    api.set_use_ssl(False).fetch()
    assert mock_http_client.get.call_args[0][0] == 'http://plain.example.test/latest'


def test_dotenv_in_working_directory_is_ignored(tmp_path, monkeypatch):
    (tmp_path / '.env').write_text('EXCHANGERATES_TIMEOUT=1.5\n')
    monkeypatch.chdir(tmp_path)

    assert Settings().TIMEOUT == 10.0


def test_log_level_is_normalised(monkeypatch):
    monkeypatch.setenv('EXCHANGERATES_LOG_LEVEL', ' debug ')

    assert Settings().LOG_LEVEL == 'DEBUG'


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv('EXCHANGERATES_LOG_LEVEL', 'verbose')

    with pytest.raises(ValidationError) as exc_info:
        Settings()

    assert 'verbose' in str(exc_info.value)
