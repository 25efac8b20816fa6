"""
AccessorPair value object linking a field to its getter and setter.
"""

from dataclasses import dataclass
from typing import Any

from .field_descriptor import FieldDescriptor


def normalize_accessor_name(name: str) -> str:
    """
    Normalize a method name for convention matching.

    Matching ignores case and underscores, so ``setActive``, ``set_active``
    and ``setactive`` normalize to the same key.
    """
    return name.replace("_", "").lower()


@dataclass(frozen=True)
class AccessorPair:
    """
    Getter and setter discovered for one field.

    Either side may be missing; a field without a setter is not exercised
    and a field without a getter is not compared.
    """

    field: FieldDescriptor
    getter_name: str | None = None
    setter_name: str | None = None
    value_type: Any = None
    setter_parameter_count: int | None = None

    @property
    def has_getter(self) -> bool:
        return self.getter_name is not None

    @property
    def has_setter(self) -> bool:
        return self.setter_name is not None

    @property
    def setter_is_unary(self) -> bool:
        """Check if the setter takes exactly one argument."""
        return self.setter_parameter_count == 1

    @property
    def is_complete(self) -> bool:
        """Check if both sides of the pair were found."""
        return self.has_getter and self.has_setter

    @property
    def field_name(self) -> str:
        return self.field.name
