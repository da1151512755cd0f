"""Application configuration — environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Placeholder shipped in the sheet setup instructions; means "not configured".
SCRIPT_URL_PLACEHOLDER = "YOUR_GOOGLE_APPS_SCRIPT_URL_HERE"


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _env_float(key: str, default: float) -> float:
    raw = _env(key).strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class CatalogConfig:
    """Where the static stall catalog is read from.

    ``url`` wins when set; otherwise the catalog is read from ``path``.
    """

    url: str = field(default_factory=lambda: _env("CATALOG_URL"))
    path: str = field(default_factory=lambda: _env("CATALOG_PATH", "data/stalls.json"))


@dataclass(frozen=True)
class SheetsConfig:
    """The external edit log / feedback endpoint (a Google Apps Script web app)."""

    script_url: str = field(default_factory=lambda: _env("SHEETS_SCRIPT_URL", SCRIPT_URL_PLACEHOLDER))
    read_timeout: float = field(default_factory=lambda: _env_float("SHEETS_READ_TIMEOUT", 10.0))
    submit_timeout: float = field(default_factory=lambda: _env_float("SHEETS_SUBMIT_TIMEOUT", 10.0))
    demo_delay: float = field(default_factory=lambda: _env_float("SHEETS_DEMO_DELAY", 0.7))

    @property
    def is_configured(self) -> bool:
        url = self.script_url.strip()
        return bool(url) and url != SCRIPT_URL_PLACEHOLDER


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE"))
    host: str = field(default_factory=lambda: _env("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8000")))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    sheets: SheetsConfig = field(default_factory=SheetsConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Load ``.env`` (if present) and build the settings aggregate."""
    load_dotenv()
    return Settings()
