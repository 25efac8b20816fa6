"""
Pytest configuration and shared fixtures for Fixture-Kit tests.

Registers the markers used across the suite, exposes the package's own
pytest fixtures and provides seeded services for tests that need
reproducible draws.
"""

import logging
import random

import pytest

from fixture_kit.config import FixtureConfig
from fixture_kit.services.accessor_verifier import AccessorVerifier
from fixture_kit.services.object_populator import ObjectPopulator
from fixture_kit.services.value_synthesizer import ValueSynthesizer

# Fixtures shipped with the package
from fixture_kit.testing import (  # noqa: F401
    accessor_verifier,
    fixture_config,
    fixture_facade,
    fixture_filler,
    fixture_rng,
)

SEED = 20240601


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (slower, requires setup)"
    )
    config.addinivalue_line("markers", "property: mark test as property-based test")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "property" in path:
            item.add_marker(pytest.mark.property)


# Service fixtures
@pytest.fixture
def seeded_rng() -> random.Random:
    """Random source with a fixed seed."""
    return random.Random(SEED)


@pytest.fixture
def default_config() -> FixtureConfig:
    """Configuration with the built-in defaults, independent of the environment."""
    return FixtureConfig()


@pytest.fixture
def small_config() -> FixtureConfig:
    """Configuration with short strings and small collections."""
    return FixtureConfig(string_length=5, collection_size=3)


@pytest.fixture
def synthesizer(seeded_rng, default_config) -> ValueSynthesizer:
    """Value synthesizer with a seeded random source."""
    return ValueSynthesizer(rng=seeded_rng, config=default_config)


@pytest.fixture
def populator(synthesizer) -> ObjectPopulator:
    """Object populator sharing the seeded synthesizer."""
    return ObjectPopulator(synthesizer=synthesizer)


@pytest.fixture
def verifier(synthesizer) -> AccessorVerifier:
    """Accessor verifier sharing the seeded synthesizer."""
    return AccessorVerifier(synthesizer=synthesizer, config=synthesizer.config)


# Test utilities
@pytest.fixture
def capture_logs(caplog):
    """Capture DEBUG records of the package loggers."""
    caplog.set_level(logging.DEBUG, logger="fixture_kit")
    return caplog
