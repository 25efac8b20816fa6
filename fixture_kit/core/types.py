"""
Shared protocol types for structural typing across services.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.accessor_pair import AccessorPair
    from ..domain.field_descriptor import FieldDescriptor


@runtime_checkable
class AccessorResolver(Protocol):
    """Strategy pairing a field with the methods that read and write it.

    The verifier only talks to this contract, so naming conventions,
    properties or explicit registrations can be swapped without touching the
    verification algorithm.
    """

    def resolve(self, cls: type, field: FieldDescriptor) -> AccessorPair: ...

    def invoke_setter(self, instance: Any, pair: AccessorPair, value: Any) -> None: ...

    def invoke_getter(self, instance: Any, pair: AccessorPair) -> Any: ...


@runtime_checkable
class ValueSource(Protocol):
    """Anything able to produce a random value for an annotation."""

    def synthesize(self, annotation: Any) -> Any: ...
