"""
Domain value objects for Fixture-Kit.

Type classification, field metadata, accessor pairs and the depth budget of
a population call.
"""

from .accessor_pair import AccessorPair, normalize_accessor_name
from .field_descriptor import FieldDescriptor
from .generation_context import GenerationContext
from .type_descriptor import (
    BigInteger,
    Byte,
    Char,
    Float32,
    Int32,
    Long,
    Short,
    TypeCategory,
    TypeDescriptor,
    describe_type,
)

__all__ = [
    "AccessorPair",
    "BigInteger",
    "Byte",
    "Char",
    "FieldDescriptor",
    "Float32",
    "GenerationContext",
    "Int32",
    "Long",
    "Short",
    "TypeCategory",
    "TypeDescriptor",
    "describe_type",
    "normalize_accessor_name",
]
