"""
TypeDescriptor value object for value generation dispatch.

Classifies a Python annotation into a closed set of generation categories so
that the synthesizer and the populator can dispatch with ordinary branching
instead of repeated runtime type comparisons.
"""

import collections
import collections.abc as cabc
import datetime
import inspect
import numbers
import types
import typing
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, NewType

# Width markers for annotations that need a narrower policy than ``int``/``float``
Char = NewType("Char", str)
Byte = NewType("Byte", int)
Short = NewType("Short", int)
Int32 = NewType("Int32", int)
Long = NewType("Long", int)
Float32 = NewType("Float32", float)
BigInteger = NewType("BigInteger", int)


class TypeCategory(Enum):
    """Generation category of a type."""

    STRING = "string"
    CHARACTER = "character"
    BOOLEAN = "boolean"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DECIMAL = "decimal"
    BIG_INTEGER = "big_integer"
    NUMBER = "number"
    DATETIME = "datetime"
    ENUM = "enum"
    COLLECTION = "collection"
    MAP = "map"
    COMPOSITE = "composite"
    OPAQUE = "opaque"

    def is_container(self) -> bool:
        """Check if the category is a collection or a map."""
        return self in (TypeCategory.COLLECTION, TypeCategory.MAP)


_MARKERS: dict[Any, TypeCategory] = {
    Char: TypeCategory.CHARACTER,
    Byte: TypeCategory.INT8,
    Short: TypeCategory.INT16,
    Int32: TypeCategory.INT32,
    Long: TypeCategory.INT64,
    Float32: TypeCategory.FLOAT32,
    BigInteger: TypeCategory.BIG_INTEGER,
}

_NUMBER_TOWER = (numbers.Number, numbers.Complex, numbers.Real, numbers.Rational, numbers.Integral)

_COLLECTION_BASES = (list, set, frozenset, tuple, collections.deque)

# Abstract container aliases and the concrete type built for them
_CONCRETE_CONTAINERS: dict[type, type] = {
    cabc.Iterable: list,
    cabc.Collection: list,
    cabc.Sequence: list,
    cabc.MutableSequence: list,
    cabc.Set: set,
    cabc.MutableSet: set,
    cabc.Mapping: dict,
    cabc.MutableMapping: dict,
}

_UNION_ORIGINS = (typing.Union, types.UnionType)


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Immutable classification of an annotation.

    ``python_type`` is the runtime class values are built from. Containers
    also carry the annotations of their elements when the declaration
    provides them; absence of that information disables element population.
    """

    category: TypeCategory
    python_type: Any = None
    annotation: Any = None
    element_type: Any = None
    key_type: Any = None
    value_type: Any = None

    @classmethod
    def opaque(cls, annotation: Any) -> "TypeDescriptor":
        """Create a descriptor for a type no value can be produced for."""
        return cls(TypeCategory.OPAQUE, annotation=annotation)

    def is_supported(self) -> bool:
        """Check if a value can be generated for this type."""
        return self.category is not TypeCategory.OPAQUE

    def is_collection(self) -> bool:
        return self.category is TypeCategory.COLLECTION

    def is_map(self) -> bool:
        return self.category is TypeCategory.MAP

    def is_container(self) -> bool:
        return self.category.is_container()

    def has_element_type(self) -> bool:
        """Check if the element type of a collection is known."""
        return self.is_collection() and self.element_type is not None

    def concrete_type(self) -> type:
        """
        Get the class to instantiate for a container.

        Abstract aliases such as ``Sequence`` or ``Mapping`` resolve to the
        matching builtin.
        """
        return _CONCRETE_CONTAINERS.get(self.python_type, self.python_type)

    def __str__(self) -> str:
        name = getattr(self.python_type, "__name__", repr(self.annotation))
        return f"{self.category.value}:{name}"


_DESCRIPTOR_CACHE: dict[Any, TypeDescriptor] = {}


def describe_type(annotation: Any) -> TypeDescriptor:
    """
    Classify an annotation into a TypeDescriptor.

    Results are cached by annotation; unhashable annotations are classified
    on every call.

    Args:
        annotation: A class, a parameterized generic or a typing construct

    Returns:
        The descriptor, OPAQUE when the annotation carries no usable type
    """
    try:
        return _DESCRIPTOR_CACHE[annotation]
    except KeyError:
        descriptor = _describe(annotation)
        _DESCRIPTOR_CACHE[annotation] = descriptor
        return descriptor
    except TypeError:
        return _describe(annotation)


def is_opaque_class(cls: type) -> bool:
    """Check if a class is a protocol or an abstract class."""
    return bool(getattr(cls, "_is_protocol", False)) or inspect.isabstract(cls)


def _describe(annotation: Any) -> TypeDescriptor:
    if annotation is None or annotation is type(None) or annotation is Any:
        return TypeDescriptor.opaque(annotation)
    if isinstance(annotation, (str, typing.ForwardRef, typing.TypeVar)):
        return TypeDescriptor.opaque(annotation)

    if isinstance(annotation, typing.NewType):
        category = _MARKERS.get(annotation)
        if category is not None:
            return TypeDescriptor(category, annotation.__supertype__, annotation)
        return _describe(annotation.__supertype__)

    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        return _describe(typing.get_args(annotation)[0])
    if origin in _UNION_ORIGINS:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return _describe(members[0])
        return TypeDescriptor.opaque(annotation)
    if origin is not None:
        return _describe_generic(annotation, origin, typing.get_args(annotation))

    if not isinstance(annotation, type):
        return TypeDescriptor.opaque(annotation)
    return _describe_class(annotation)


def _describe_generic(annotation: Any, origin: Any, args: tuple[Any, ...]) -> TypeDescriptor:
    if not isinstance(origin, type):
        return TypeDescriptor.opaque(annotation)

    if issubclass(origin, cabc.Mapping):
        key_type, value_type = args if len(args) == 2 else (None, None)
        return TypeDescriptor(
            TypeCategory.MAP, origin, annotation, key_type=key_type, value_type=value_type
        )

    if issubclass(origin, tuple):
        # Only the homogeneous ``tuple[X, ...]`` form has a single element type
        element = args[0] if len(args) == 2 and args[1] is Ellipsis else None
        return TypeDescriptor(TypeCategory.COLLECTION, origin, annotation, element_type=element)

    if issubclass(origin, _COLLECTION_BASES) or origin in _CONCRETE_CONTAINERS:
        element = args[0] if len(args) == 1 else None
        return TypeDescriptor(TypeCategory.COLLECTION, origin, annotation, element_type=element)

    if origin is type or issubclass(origin, (str, bytes)):
        return TypeDescriptor.opaque(annotation)

    # User-defined generic class such as ``Box[int]``
    return _describe_class(origin)


def _describe_class(cls: type) -> TypeDescriptor:
    if issubclass(cls, Enum):
        return TypeDescriptor(TypeCategory.ENUM, cls, cls)
    if cls is bool:
        return TypeDescriptor(TypeCategory.BOOLEAN, cls, cls)
    if issubclass(cls, str):
        return TypeDescriptor(TypeCategory.STRING, cls, cls)
    if cls in _NUMBER_TOWER:
        return TypeDescriptor(TypeCategory.NUMBER, cls, cls)
    if issubclass(cls, int):
        return TypeDescriptor(TypeCategory.INT32, cls, cls)
    if issubclass(cls, float):
        return TypeDescriptor(TypeCategory.FLOAT64, cls, cls)
    if issubclass(cls, Decimal):
        return TypeDescriptor(TypeCategory.DECIMAL, cls, cls)
    if issubclass(cls, datetime.date):
        return TypeDescriptor(TypeCategory.DATETIME, cls, cls)
    if issubclass(cls, cabc.Mapping):
        return TypeDescriptor(TypeCategory.MAP, cls, cls)
    if issubclass(cls, _COLLECTION_BASES) or cls in _CONCRETE_CONTAINERS:
        return TypeDescriptor(TypeCategory.COLLECTION, cls, cls)
    if is_opaque_class(cls):
        return TypeDescriptor.opaque(cls)
    return TypeDescriptor(TypeCategory.COMPOSITE, cls, cls)
