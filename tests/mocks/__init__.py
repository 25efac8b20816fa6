"""
Mock utilities package for Fixture-Kit tests.

Provides random sources with predictable draws for boundary checks.
"""

from .random_mocks import MaximumRandom, MinimumRandom

__all__ = [
    "MaximumRandom",
    "MinimumRandom",
]
