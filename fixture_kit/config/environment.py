"""
Environment-driven configuration loading.

Reads ``FIXTURE_KIT_*`` variables into a FixtureConfig and wires the package
logger to a stream handler when asked to.
"""

import logging
import os
from enum import Enum
from functools import lru_cache

from ..utilities.constants import ENV_PREFIX
from .fixture_config import FixtureConfig

PACKAGE_LOGGER_NAME = "fixture_kit"


class Environment(Enum):
    """Execution environments."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"

    @property
    def default_log_level(self) -> str:
        """Log level used when none is configured explicitly."""
        return "DEBUG" if self is Environment.DEVELOPMENT else "WARNING"

    @classmethod
    def current(cls) -> "Environment":
        """Detect the environment from ``FIXTURE_KIT_ENV``."""
        value = os.getenv(f"{ENV_PREFIX}ENV", cls.TESTING.value).strip().lower()
        try:
            return cls(value)
        except ValueError as e:
            raise ValueError(f"Unknown {ENV_PREFIX}ENV value: {value}") from e


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got: {raw}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def get_environment_config(environment: Environment | None = None) -> FixtureConfig:
    """
    Build a configuration from environment variables.

    Args:
        environment: Environment to take defaults from, detected when omitted

    Returns:
        FixtureConfig with every unset variable at its default
    """
    environment = environment or Environment.current()
    defaults = FixtureConfig()

    return FixtureConfig(
        string_length=_env_int("STRING_LENGTH", defaults.string_length),
        collection_size=_env_int("COLLECTION_SIZE", defaults.collection_size),
        float_multiplier_bound=_env_int("FLOAT_BOUND", defaults.float_multiplier_bound),
        default_max_depth=_env_int("MAX_DEPTH", defaults.default_max_depth),
        log_comparisons=_env_bool("LOG_COMPARISONS", defaults.log_comparisons),
        log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", environment.default_log_level).upper(),
    )


@lru_cache(maxsize=1)
def get_default_config() -> FixtureConfig:
    """Get the process-wide configuration, read once from the environment."""
    return get_environment_config()


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Log level, the configured one when omitted

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level or get_default_config().log_level)

    if not any(getattr(h, "_fixture_kit_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handler._fixture_kit_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
