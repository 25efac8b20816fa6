"""Integration tests for Fixture-Kit."""
