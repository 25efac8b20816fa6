"""
FieldDescriptor value object describing one attribute of a target type.
"""

from dataclasses import dataclass
from typing import Any

from ..utilities.constants import FieldAccessError
from .type_descriptor import TypeCategory, TypeDescriptor, describe_type

_MISSING = object()


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Metadata and raw access for one field.

    Reads and writes bypass ``__setattr__`` overrides and frozen dataclass
    guards, so values land on the instance the same way for every class.
    """

    name: str
    declaring_type: type
    annotation: Any = None

    @property
    def type(self) -> TypeDescriptor:
        return describe_type(self.annotation)

    @property
    def accessor_name(self) -> str:
        """Field name used for accessor matching, without leading underscores."""
        return self.name.lstrip("_") or self.name

    def is_boolean(self) -> bool:
        return self.type.category is TypeCategory.BOOLEAN

    def read(self, instance: Any, default: Any = None) -> Any:
        """
        Read the current value of the field.

        Raises:
            FieldAccessError: If the attribute exists but cannot be read
        """
        try:
            value = getattr(instance, self.name, _MISSING)
        except Exception as e:
            raise FieldAccessError(self.name, f"{type(e).__name__}: {e}") from e
        return default if value is _MISSING else value

    def write(self, instance: Any, value: Any) -> None:
        """
        Assign a value to the field.

        Raises:
            FieldAccessError: If the attribute cannot be assigned
        """
        try:
            object.__setattr__(instance, self.name, value)
        except (AttributeError, TypeError) as e:
            raise FieldAccessError(self.name, f"{type(e).__name__}: {e}") from e

    def __str__(self) -> str:
        return f"{self.declaring_type.__name__}.{self.name}"
