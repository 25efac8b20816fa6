"""Unit tests for Fixture-Kit."""
