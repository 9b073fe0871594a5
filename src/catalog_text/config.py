"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class CosmosConfig:
    endpoint: str = field(default_factory=lambda: _env("COSMOS_ENDPOINT"))
    key: str = field(default_factory=lambda: _env("COSMOS_KEY"))
    database: str = field(default_factory=lambda: _env("COSMOS_DATABASE", "catalog-text"))


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("APP_LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("APP_LOG_FILE"))
    host: str = field(default_factory=lambda: _env("APP_HOST", "0.0.0.0"))  # noqa: S104
    port: int = field(default_factory=lambda: int(_env("APP_PORT", "3000")))
    slow_request_ms: int = field(
        default_factory=lambda: int(_env("APP_SLOW_REQUEST_MS", "800"))
    )

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    cosmos: CosmosConfig = field(default_factory=CosmosConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Load settings, reading a local ``.env`` file first if one exists."""
    load_dotenv()
    return Settings()
