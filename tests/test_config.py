"""Tests for configuration module."""

from expo_stalls.config import (
    SCRIPT_URL_PLACEHOLDER,
    AppConfig,
    CatalogConfig,
    Settings,
    SheetsConfig,
    _env,
    _env_float,
    load_settings,
)


def test_env_returns_value(monkeypatch):
    monkeypatch.setenv("TEST_KEY", "hello")
    assert _env("TEST_KEY") == "hello"


def test_env_returns_default_when_missing(monkeypatch):
    monkeypatch.delenv("TEST_KEY", raising=False)
    assert _env("TEST_KEY", "fallback") == "fallback"


def test_env_returns_empty_string_default(monkeypatch):
    monkeypatch.delenv("TEST_KEY", raising=False)
    assert _env("TEST_KEY") == ""


def test_env_float_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("TEST_KEY", "soon")
    assert _env_float("TEST_KEY", 2.5) == 2.5


def test_catalog_config_defaults(monkeypatch):
    monkeypatch.delenv("CATALOG_URL", raising=False)
    monkeypatch.delenv("CATALOG_PATH", raising=False)
    config = CatalogConfig()
    assert config.url == ""
    assert config.path == "data/stalls.json"


def test_sheets_config_defaults_to_placeholder(monkeypatch):
    for key in ["SHEETS_SCRIPT_URL", "SHEETS_SUBMIT_TIMEOUT", "SHEETS_DEMO_DELAY", "SHEETS_READ_TIMEOUT"]:
        monkeypatch.delenv(key, raising=False)
    config = SheetsConfig()
    assert config.script_url == SCRIPT_URL_PLACEHOLDER
    assert config.is_configured is False
    assert config.submit_timeout == 10.0
    assert config.demo_delay == 0.7


def test_sheets_config_from_env(monkeypatch):
    monkeypatch.setenv("SHEETS_SCRIPT_URL", "https://script.example.com/exec")
    monkeypatch.setenv("SHEETS_SUBMIT_TIMEOUT", "3")
    config = SheetsConfig()
    assert config.is_configured is True
    assert config.submit_timeout == 3.0


def test_sheets_config_blank_url_is_not_configured():
    assert SheetsConfig(script_url="   ").is_configured is False


def test_app_config_is_development_true():
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "env", "development")
    assert config.is_development is True


def test_app_config_is_development_false():
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "env", "production")
    assert config.is_development is False


def test_load_settings_creates_all_sub_configs(monkeypatch):
    monkeypatch.setattr("expo_stalls.config.load_dotenv", lambda: False)
    monkeypatch.setenv("PORT", "9001")
    settings = load_settings()
    assert isinstance(settings, Settings)
    assert isinstance(settings.catalog, CatalogConfig)
    assert isinstance(settings.sheets, SheetsConfig)
    assert isinstance(settings.app, AppConfig)
    assert settings.app.port == 9001


def test_app_config_log_file(monkeypatch):
    monkeypatch.delenv("LOG_FILE", raising=False)
    assert AppConfig().log_file == ""
    monkeypatch.setenv("LOG_FILE", "api.log")
    assert AppConfig().log_file == "api.log"
