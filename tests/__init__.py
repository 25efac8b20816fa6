"""
Test package for Fixture-Kit.

Unit, property-based and integration tests for value synthesis, object
population and accessor verification.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "fixtures",  # Sample target classes
    "integration",  # End-to-end scenarios through the public API
    "mocks",  # Deterministic random sources
    "property",  # Hypothesis-based tests
    "unit",  # Unit test suite
]
