"""
Configuration management for Fixture-Kit.

This package provides the generation policy object and the helpers that
load it from the environment.
"""

from .environment import (
    Environment,
    configure_logging,
    get_default_config,
    get_environment_config,
)
from .fixture_config import FixtureConfig

__all__ = [
    "Environment",
    "FixtureConfig",
    "configure_logging",
    "get_default_config",
    "get_environment_config",
]
