"""
Pytest fixtures for Fixture-Kit.

Enable them in a ``conftest.py`` with::

    pytest_plugins = ["fixture_kit.testing"]
"""

import random

import pytest

from .config import FixtureConfig, get_default_config
from .core.fixture_facade import FixtureFacade, create_fixture_facade


@pytest.fixture
def fixture_config() -> FixtureConfig:
    """Generation policy used by the other fixtures."""
    return get_default_config()


@pytest.fixture
def fixture_rng() -> random.Random:
    """Fresh random source for one test."""
    return random.Random()


@pytest.fixture
def fixture_facade(fixture_config: FixtureConfig, fixture_rng: random.Random) -> FixtureFacade:
    """Facade sharing one random source across synthesis, fill and verification."""
    return create_fixture_facade(config=fixture_config, rng=fixture_rng)


@pytest.fixture
def fixture_filler(fixture_facade: FixtureFacade):
    """Callable filling a class with random values."""
    return fixture_facade.fill


@pytest.fixture
def accessor_verifier(fixture_facade: FixtureFacade):
    """Callable verifying the accessors of an instance."""
    return fixture_facade.verify_accessors
