"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_CHECK_API_URL = "http://localhost:8080/api/lotto/check"
DEFAULT_CHECK_API_TIMEOUT = 10.0

RESPONSE_SHAPES = ("wrapped", "list")


def resolve_check_api_timeout() -> float:
    """Resolve the scoring service timeout in seconds.

    Falls back to the default when CHECK_API_TIMEOUT is unset or not a
    positive number.
    """

    raw = os.getenv("CHECK_API_TIMEOUT")
    if not raw:
        return DEFAULT_CHECK_API_TIMEOUT

    try:
        timeout = float(raw)
    except ValueError:
        return DEFAULT_CHECK_API_TIMEOUT

    return timeout if timeout > 0 else DEFAULT_CHECK_API_TIMEOUT


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    TESTING: bool = False

    # External scoring service
    CHECK_API_URL: str = os.getenv("CHECK_API_URL", DEFAULT_CHECK_API_URL)
    CHECK_API_TIMEOUT: float = resolve_check_api_timeout()
    CHECK_API_RESPONSE_SHAPE: str = os.getenv("CHECK_API_RESPONSE_SHAPE", "wrapped").lower().strip()  # "wrapped" | "list"

    # Initial content of the input textarea
    DEFAULT_LOTTO_INPUT: str = "1,2,3,4,5,6\n7,8,9,10,11,12"


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Testing configuration."""

    DEBUG: bool = False
    TESTING: bool = True


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
