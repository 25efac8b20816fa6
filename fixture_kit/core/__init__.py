"""
Core package for Fixture-Kit.

Introspection helpers, result types, protocols and the public facade.
"""
