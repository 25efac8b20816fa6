"""
Type introspection helpers.

This module is the single place that asks Python about a class: which fields
it declares, what their annotations resolve to, and how to build an instance
with no arguments. Everything above it works with FieldDescriptor and
TypeDescriptor values only.
"""

import dataclasses
import inspect
import logging
import sys
import typing
from collections.abc import Iterable
from typing import Any, ClassVar, Final, TypeVar

from ..domain.field_descriptor import FieldDescriptor
from ..domain.type_descriptor import is_opaque_class
from ..utilities.constants import DENIED_FIELD_NAMES, InstantiationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_type_hints(cls: type) -> dict[str, Any]:
    """
    Resolve the annotations of a class and its bases.

    When the class as a whole cannot be resolved, each annotation is resolved
    on its own against the declaring module and class namespace. Entries that
    still fail stay as raw strings and are treated as opaque types, the rest
    keep their resolved types.
    """
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        logger.debug(f"Resolving annotations of {cls!r} one at a time: {e}")

    hints: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        module = sys.modules.get(klass.__module__)
        globalns = dict(getattr(module, "__dict__", {}))
        localns = dict(vars(klass))
        for name, annotation in _own_annotations(klass).items():
            hints[name] = _resolve_annotation(klass, name, annotation, globalns, localns)
    return hints


def collect_fields(
    cls: type,
    include_super_fields: bool = True,
    ignored_field_names: Iterable[str] = (),
    instance: Any = None,
) -> list[FieldDescriptor]:
    """
    Enumerate the fields of a class.

    Fields are the annotated attributes of the class (and of its bases when
    ``include_super_fields`` is set), base classes first. When an instance is
    given, attributes found only in its ``__dict__`` are appended with no
    annotation.

    Static fields (``ClassVar``/``Final``), ``InitVar`` pseudo-fields, dunder
    names, the fixed denylist and the ignored names are excluded.

    Args:
        cls: Class to inspect
        include_super_fields: Include fields declared by base classes
        ignored_field_names: Field names to leave out
        instance: Optional instance contributing undeclared attributes

    Returns:
        Field descriptors in declaration order
    """
    ignored = frozenset(ignored_field_names)
    hints = resolve_type_hints(cls)
    klasses = reversed(cls.__mro__) if include_super_fields else (cls,)

    declared: dict[str, type] = {}
    for klass in klasses:
        if klass is object:
            continue
        for name in _own_annotations(klass):
            declared[name] = klass

    if instance is not None:
        for name in getattr(instance, "__dict__", {}):
            declared.setdefault(name, cls)

    fields = []
    for name, declaring_type in declared.items():
        annotation = hints.get(name)
        if name in ignored or _is_excluded(name, annotation):
            continue
        fields.append(FieldDescriptor(name, declaring_type, annotation))
    return fields


def instantiate(cls: type[T]) -> T:
    """
    Build an instance through the default construction path.

    Classes whose constructor binds with no arguments are called directly.
    Dataclasses with required fields are allocated without running
    ``__init__`` and every field is preset to its declared default, or None
    when it has none.

    Raises:
        InstantiationError: For abstract classes, protocols, classes needing
            constructor arguments and constructors that raise
    """
    if not isinstance(cls, type):
        _fail(cls, "not a class")
    if is_opaque_class(cls):
        _fail(cls, "abstract class or protocol")

    if _has_default_constructor(cls):
        try:
            return cls()
        except Exception as e:
            _fail(cls, f"constructor raised {type(e).__name__}: {e}", e)

    if dataclasses.is_dataclass(cls):
        return _allocate_dataclass(cls)

    _fail(cls, "no constructor callable without arguments")


def _allocate_dataclass(cls: type[T]) -> T:
    try:
        instance = cls.__new__(cls)
        for dc_field in dataclasses.fields(cls):
            if dc_field.default is not dataclasses.MISSING:
                value = dc_field.default
            elif dc_field.default_factory is not dataclasses.MISSING:
                value = dc_field.default_factory()
            else:
                value = None
            object.__setattr__(instance, dc_field.name, value)
    except Exception as e:
        _fail(cls, f"allocation raised {type(e).__name__}: {e}", e)
    return instance


def _has_default_constructor(cls: type) -> bool:
    try:
        inspect.signature(cls).bind()
    except TypeError:
        return False
    except ValueError:
        # Builtins without signature metadata; let the call decide
        return True
    return True


def _fail(cls: Any, reason: str, cause: BaseException | None = None) -> typing.NoReturn:
    logger.error(f"Given class {cls!r} can't be properly instantiated: {reason}")
    raise InstantiationError(cls, reason) from cause


def _own_annotations(klass: type) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(klass))
    except NameError as e:
        logger.warning(f"Cannot read annotations of {klass!r}: {e}")
        return {}


def _is_excluded(name: str, annotation: Any) -> bool:
    if name in DENIED_FIELD_NAMES:
        return True
    if name.startswith("__") and name.endswith("__"):
        return True
    if isinstance(annotation, dataclasses.InitVar) or annotation is dataclasses.InitVar:
        return True

    if typing.get_origin(annotation) is typing.Annotated:
        annotation = typing.get_args(annotation)[0]
    return annotation in (ClassVar, Final) or typing.get_origin(annotation) in (ClassVar, Final)


def _resolve_annotation(
    klass: type, name: str, annotation: Any, globalns: dict[str, Any], localns: dict[str, Any]
) -> Any:
    carrier = type(klass.__name__, (), {"__annotations__": {name: annotation}})
    try:
        return typing.get_type_hints(carrier, globalns, localns, include_extras=True)[name]
    except (NameError, TypeError) as e:
        logger.warning(f"Cannot resolve {klass.__name__}.{name}, treating it as opaque: {e}")
        return annotation
