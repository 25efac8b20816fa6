"""Property-based tests for Fixture-Kit."""
