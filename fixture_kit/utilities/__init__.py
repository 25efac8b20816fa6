"""
Utilities package for Fixture-Kit.

Constants and errors, input validators, accessor resolution strategies,
field suppliers and report rendering.
"""
