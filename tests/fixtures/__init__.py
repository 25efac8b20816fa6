"""
Test fixtures package for Fixture-Kit.

Provides the sample classes the fill and verification tests run against.
"""
