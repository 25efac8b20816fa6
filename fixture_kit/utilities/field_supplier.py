"""
Lazy access to the current value of an object's attribute.

Useful when a collaborator needs a zero-argument callable that always returns
what a test currently holds in one of its attributes, for example a mock that
is replaced between test cases.
"""

import inspect
import re
from typing import Any, Generic, TypeVar

from .validators import validate_non_empty_string

T = TypeVar("T")


def find_declared_attribute(cls: type, field_name: str) -> tuple[type, str]:
    """
    Find an attribute declared anywhere in a class hierarchy.

    ``field_name`` is a regular expression matched against the full
    attribute name, so a private ``_connection`` is found with
    ``"_connection"`` or ``"_?connection"``.

    Returns:
        The declaring class and the attribute name

    Raises:
        AttributeError: If no class in the hierarchy declares a match
    """
    validate_non_empty_string(field_name, "Field name")
    pattern = re.compile(field_name)

    for klass in cls.__mro__:
        declared = list(inspect.get_annotations(klass)) + list(vars(klass))
        for name in declared:
            if pattern.fullmatch(name):
                return klass, name
    raise AttributeError(f"The field '{field_name}' not found in instance of {cls!r}")


class FieldSupplier(Generic[T]):
    """
    Zero-argument callable returning the current value of an attribute.

    The attribute is looked up once, on the instance first and then in the
    class hierarchy; every call reads its value again.
    """

    def __init__(self, owner: Any, field_name: str, field_type: type[T]) -> None:
        """
        Initialize the supplier.

        Args:
            owner: Object holding the attribute
            field_name: Attribute name or pattern
            field_type: Type the value must be an instance of

        Raises:
            AttributeError: If the attribute does not exist
            TypeError: If the current value is not a ``field_type``
        """
        validate_non_empty_string(field_name, "Field name")
        self.owner = owner
        self.field_type = field_type

        instance_attributes = getattr(owner, "__dict__", {})
        pattern = re.compile(field_name)
        matches = [name for name in instance_attributes if pattern.fullmatch(name)]
        if matches:
            self.field_name = matches[0]
        else:
            _, self.field_name = find_declared_attribute(type(owner), field_name)

        self._check_type(getattr(owner, self.field_name, None))

    def get(self) -> T:
        """
        Read the current value.

        Raises:
            AttributeError: If the attribute can no longer be read
            TypeError: If the value is not a ``field_type``
        """
        try:
            value = getattr(self.owner, self.field_name)
        except AttributeError as e:
            raise AttributeError(f"Can not access to field {self.field_name}") from e
        self._check_type(value)
        return value

    def __call__(self) -> T:
        return self.get()

    def _check_type(self, value: Any) -> None:
        if value is not None and not isinstance(value, self.field_type):
            raise TypeError(
                f"The type of the field ({type(value).__name__}) is not assignable to "
                f"{self.field_type.__name__}"
            )

    def __repr__(self) -> str:
        return f"FieldSupplier({type(self.owner).__name__}.{self.field_name})"


def field_supplier(owner: Any, field_name: str, field_type: type[T]) -> FieldSupplier[T]:
    """Create a FieldSupplier for an attribute of ``owner``."""
    return FieldSupplier(owner, field_name, field_type)
