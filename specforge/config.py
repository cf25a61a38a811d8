# FILE: specforge/config.py
"""
Environment configuration.

Values come from the process environment; main.py calls load_dotenv() before
anything reads them, so a local .env file works too.

Required:
- DATABASE_URL    SQLAlchemy URL (e.g. postgresql+psycopg://..., sqlite:///./data/specforge.db)
- OPENAI_API_KEY  key for the completion endpoint

Optional:
- OPENAI_BASE_URL any OpenAI-compatible endpoint
- OPENAI_MODEL    default gpt-4o-mini
- HOST / PORT     default 0.0.0.0 / 3001
- APP_ENV         "production" switches CORS and log level defaults
- LOG_LEVEL       overrides the level picked from APP_ENV
- CORS_ORIGINS    comma separated list, or "*"
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

REQUIRED_ENV_VARS = ("DATABASE_URL", "OPENAI_API_KEY")

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001
DEV_CORS_ORIGIN = "http://localhost:3000"

# Names both logging and uvicorn accept
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class ConfigError(Exception):
    """Required configuration is missing or invalid."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(f"Missing required environment variables: {', '.join(missing)}")


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str]
    openai_api_key: Optional[str]
    openai_base_url: Optional[str] = None
    openai_model: str = DEFAULT_MODEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    environment: str = "development"
    log_level: str = "DEBUG"
    cors_origins: List[str] = field(default_factory=lambda: [DEV_CORS_ORIGIN])

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _parse_origins(raw: Optional[str], production: bool) -> List[str]:
    if raw is None or not raw.strip():
        return ["*"] if production else [DEV_CORS_ORIGIN]
    if raw.strip() == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


def _parse_log_level(raw: Optional[str], production: bool) -> str:
    default = "INFO" if production else "DEBUG"
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    level = LOG_LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        logger.warning("[config] LOG_LEVEL=%r is not one of %s; using %s", raw, ", ".join(LOG_LEVELS), default)
        return default
    return level


def load_settings() -> Settings:
    """Build Settings from the current environment. Never raises for missing keys."""
    environment = os.getenv("APP_ENV", "development").strip().lower() or "development"
    production = environment == "production"

    port_raw = os.getenv("PORT", str(DEFAULT_PORT))
    try:
        port = int(port_raw)
    except ValueError:
        logger.warning("[config] PORT=%r is not an integer; using %d", port_raw, DEFAULT_PORT)
        port = DEFAULT_PORT

    return Settings(
        database_url=os.getenv("DATABASE_URL") or None,
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
        openai_model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
        host=os.getenv("HOST") or DEFAULT_HOST,
        port=port,
        environment=environment,
        log_level=_parse_log_level(os.getenv("LOG_LEVEL"), production),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS"), production),
    )


def missing_env_vars() -> List[str]:
    return [key for key in REQUIRED_ENV_VARS if not os.getenv(key)]


def validate_env() -> None:
    """Raise ConfigError listing every required variable that is unset or empty."""
    missing = missing_env_vars()
    if missing:
        raise ConfigError(missing)


def require_env_or_exit() -> None:
    """Refuse to start without the required configuration."""
    try:
        validate_env()
    except ConfigError as e:
        logger.critical("[startup] %s", e)
        sys.exit(1)
