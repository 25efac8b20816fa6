"""
Accessor pair resolution strategies.

This module isolates how a field is matched with its getter and setter.
The verifier depends only on the AccessorResolver protocol, so a class can be
checked through bean-style methods or through Python properties.
"""

import inspect
import logging
import typing
from typing import Any

from ..domain.accessor_pair import AccessorPair, normalize_accessor_name
from ..domain.field_descriptor import FieldDescriptor
from ..domain.type_descriptor import TypeCategory, describe_type
from ..utilities.constants import BOOLEAN_GETTER_PREFIX, GETTER_PREFIX, SETTER_PREFIX

logger = logging.getLogger(__name__)


def _parameter_hints(func: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError) as e:
        logger.debug(f"Cannot resolve type hints of {func!r}: {e}")
        return {}


class ConventionAccessorResolver:
    """
    Matches accessors by naming convention.

    The setter is ``set`` + field name. The getter is ``get`` + field name,
    or ``is`` + field name for boolean fields. Leading underscores of the
    field name are dropped and matching ignores case and underscores, so both
    ``setActive``/``isActive`` and ``set_active``/``is_active`` pair with a
    field named ``active`` or ``_active``.
    """

    def __init__(self) -> None:
        self._methods_by_type: dict[type, dict[str, str]] = {}

    def resolve(self, cls: type, field: FieldDescriptor) -> AccessorPair:
        """Find the accessor pair of a field on ``cls``."""
        methods = self._methods(cls)
        base_name = normalize_accessor_name(field.accessor_name)

        setter_name = methods.get(SETTER_PREFIX + base_name)
        value_type = field.annotation
        parameter_count = None
        if setter_name is not None:
            setter = inspect.getattr_static(cls, setter_name)
            parameters = list(inspect.signature(setter).parameters.values())[1:]
            parameter_count = len(parameters)
            if parameter_count == 1:
                hint = _parameter_hints(setter).get(parameters[0].name)
                if hint is not None:
                    value_type = hint

        boolean = describe_type(value_type).category is TypeCategory.BOOLEAN or field.is_boolean()
        getter_prefix = BOOLEAN_GETTER_PREFIX if boolean else GETTER_PREFIX
        getter_name = methods.get(getter_prefix + base_name)

        return AccessorPair(field, getter_name, setter_name, value_type, parameter_count)

    def invoke_setter(self, instance: Any, pair: AccessorPair, value: Any) -> None:
        getattr(instance, pair.setter_name)(value)

    def invoke_getter(self, instance: Any, pair: AccessorPair) -> Any:
        return getattr(instance, pair.getter_name)()

    def _methods(self, cls: type) -> dict[str, str]:
        """Map normalized method names of ``cls`` to their real names."""
        methods = self._methods_by_type.get(cls)
        if methods is None:
            methods = {}
            for name in dir(cls):
                if name.startswith("__"):
                    continue
                if inspect.isfunction(inspect.getattr_static(cls, name)):
                    methods.setdefault(normalize_accessor_name(name), name)
            self._methods_by_type[cls] = methods
        return methods


class PropertyAccessorResolver:
    """
    Matches a field with a property of the same name.

    ``_price`` pairs with a ``price`` property; the property getter is the
    getter and its setter, when defined, the setter.
    """

    def resolve(self, cls: type, field: FieldDescriptor) -> AccessorPair:
        """Find the property exposing a field on ``cls``."""
        name = field.accessor_name
        prop = inspect.getattr_static(cls, name, None)
        if not isinstance(prop, property):
            return AccessorPair(field)

        value_type = field.annotation
        if value_type is None and prop.fget is not None:
            value_type = _parameter_hints(prop.fget).get("return")

        return AccessorPair(
            field,
            getter_name=name if prop.fget is not None else None,
            setter_name=name if prop.fset is not None else None,
            value_type=value_type,
            setter_parameter_count=1 if prop.fset is not None else None,
        )

    def invoke_setter(self, instance: Any, pair: AccessorPair, value: Any) -> None:
        setattr(instance, pair.setter_name, value)

    def invoke_getter(self, instance: Any, pair: AccessorPair) -> Any:
        return getattr(instance, pair.getter_name)
