"""Application configuration objects."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Type

from sqlalchemy.pool import NullPool


class BaseConfig:
    """Shared defaults across all environments."""

    APP_NAME = "Writing Style Survey"
    COMPANY_NAME = os.getenv("COMPANY_NAME", "Diamond Consultants")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        "sqlite+pysqlite:///survey_dev.db",
    )
    AI_MODEL_NAME = os.getenv("AI_MODEL_NAME", "gemini-1.5-flash")
    AI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("AI_API_KEY", "")
    AI_API_BASE = os.getenv(
        "AI_API_BASE",
        "https://generativelanguage.googleapis.com/v1beta/openai",
    )
    AI_TEMPERATURE = float(os.getenv("AI_TEMPERATURE", "0.7"))
    AI_CONNECT_TIMEOUT_SEC = int(os.getenv("AI_CONNECT_TIMEOUT_SEC", "15"))
    AI_READ_TIMEOUT_SEC = int(os.getenv("AI_READ_TIMEOUT_SEC", "120"))
    AI_RATE_LIMIT = os.getenv("AI_RATE_LIMIT", "20 per minute")
    SAMPLE_SEED_SENTENCE = os.getenv(
        "SAMPLE_SEED_SENTENCE",
        "I hope this email finds you well. I wanted to reach out regarding an exciting "
        "leadership opportunity that perfectly aligns with your expertise and career trajectory.",
    )
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    RATE_LIMIT_DEFAULTS = [limit.strip() for limit in os.getenv("RATE_LIMIT_DEFAULTS", "200 per minute;1000 per day").split(";") if limit.strip()]
    RATELIMIT_ENABLED = os.getenv("RATELIMIT_ENABLED", "true").lower() in {"1", "true", "yes"}
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    JSON_SORT_KEYS = False
    SQLITE_TIMEOUT_SEC = int(os.getenv("SQLITE_TIMEOUT_SEC", "15"))
    if SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
        SQLALCHEMY_ENGINE_OPTIONS = {
            "poolclass": NullPool,
            "connect_args": {"timeout": SQLITE_TIMEOUT_SEC, "check_same_thread": False},
        }
    else:
        SQLALCHEMY_ENGINE_OPTIONS = {
            "pool_pre_ping": True,
            "pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
            "max_overflow": int(os.getenv("DB_MAX_OVERFLOW", "10")),
            "pool_timeout": int(os.getenv("DB_POOL_TIMEOUT", "30")),
        }


class DevConfig(BaseConfig):
    DEBUG = True


class ProdConfig(BaseConfig):
    DEBUG = False


class TestConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite+pysqlite:///:memory:"
    # No poolclass here so Flask-SQLAlchemy falls back to StaticPool for :memory:.
    SQLALCHEMY_ENGINE_OPTIONS = {"connect_args": {"check_same_thread": False}}
    AI_API_KEY = "test-key"
    AI_API_BASE = "https://ai.test/v1"
    RATELIMIT_ENABLED = False


CONFIG_ALIASES: dict[str, Type[BaseConfig]] = {
    "dev": DevConfig,
    "development": DevConfig,
    "prod": ProdConfig,
    "production": ProdConfig,
    "test": TestConfig,
    "testing": TestConfig,
}


@lru_cache
def resolve_config(name_or_class: Any) -> Any:
    """Resolve config argument to the object expected by `app.config.from_object`."""

    if name_or_class is None:
        return DevConfig
    if isinstance(name_or_class, str):
        return CONFIG_ALIASES.get(name_or_class, name_or_class)
    return name_or_class
