"""
Services package for Fixture-Kit.

Value synthesis, object population and accessor verification.
"""

from .accessor_verifier import AccessorVerifier, VerificationRecord
from .object_populator import ObjectPopulator
from .value_synthesizer import ValueSynthesizer

__all__ = [
    "AccessorVerifier",
    "ObjectPopulator",
    "ValueSynthesizer",
    "VerificationRecord",
]
