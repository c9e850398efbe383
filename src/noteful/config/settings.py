"""
Configuration settings for the Noteful API
"""

import os
import logging
from dataclasses import dataclass
from typing import Dict, Optional

logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "development")  # development, test or production
PORT = int(os.getenv("PORT", 8080))
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")]


class ConfigurationError(ValueError):
    """Raised when a named environment is unknown or incomplete"""


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection settings for one named environment"""
    env_name: str
    database_url: str
    min_pool_size: int = 1
    max_pool_size: int = 5
    debug: bool = False

    @property
    def database_name(self) -> str:
        """Database name at the end of the connection string"""
        return self.database_url.rsplit("/", 1)[-1].split("?", 1)[0]


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None


class DatabaseEnvironmentConfig:
    """Environment-isolated database configuration so tests never touch development data"""

    ENVIRONMENTS = ("development", "test", "production")

    @staticmethod
    def _profiles() -> Dict[str, Dict]:
        # Read at call time so a test run can force its variables before opening a pool
        min_size = _env_int("DB_MIN_POOL_SIZE", 1)
        max_size = _env_int("DB_MAX_POOL_SIZE", 5)
        return {
            "development": {
                "database_url": os.getenv("DATABASE_URL", "postgresql://localhost/noteful-app"),
                "min_pool_size": min_size,
                "max_pool_size": max_size,
                "debug": _env_flag("DB_DEBUG", True),
            },
            "test": {
                "database_url": os.getenv("TEST_DATABASE_URL", "postgresql://localhost/noteful-test"),
                "min_pool_size": min_size,
                "max_pool_size": max_size,
                "debug": _env_flag("DB_DEBUG"),
            },
            "production": {
                "database_url": os.getenv("DATABASE_URL"),
                "min_pool_size": _env_int("DB_MIN_POOL_SIZE", 2),
                "max_pool_size": _env_int("DB_MAX_POOL_SIZE", 10),
                "debug": False,
            },
        }

    @classmethod
    def get_config(cls, env_name: Optional[str] = None) -> DatabaseSettings:
        """Get database settings for a named environment (defaults to the active ENV)"""
        name = (env_name or os.getenv("ENV", ENV)).strip().lower()
        profiles = cls._profiles()

        if name not in profiles:
            raise ConfigurationError(
                f"Unknown environment '{name}'. Expected one of: {', '.join(cls.ENVIRONMENTS)}"
            )

        profile = profiles[name]
        if not profile["database_url"]:
            raise ConfigurationError(f"No database connection string configured for environment '{name}'")
        if profile["min_pool_size"] > profile["max_pool_size"]:
            raise ConfigurationError(
                f"DB_MIN_POOL_SIZE ({profile['min_pool_size']}) exceeds DB_MAX_POOL_SIZE ({profile['max_pool_size']})"
            )

        return DatabaseSettings(env_name=name, **profile)


logger.debug(f"Environment: {ENV}")
