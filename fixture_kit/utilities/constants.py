"""
Constants and shared exception types for Fixture-Kit.

This module centralizes the generation policy constants and the error
vocabulary used by the synthesizer, the populator and the accessor verifier.
"""

from typing import Any

# Value generation policy
DEFAULT_STRING_LENGTH = 25
PRINTABLE_ASCII_MIN = 32
PRINTABLE_ASCII_MAX = 126
FLOAT_MULTIPLIER_BOUND = 999999

INT8_MAX = 2**7 - 1
INT16_MAX = 2**15 - 1
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Population policy
DEFAULT_MAX_DEPTH = 0
DEFAULT_COLLECTION_SIZE = 10

# Field enumeration
DENIED_FIELD_NAMES = frozenset(
    {
        "__slots__",
        "__weakref__",
        "__dict__",
        "_abc_impl",
        "serialVersionUID",
    }
)

# Accessor naming convention
SETTER_PREFIX = "set"
GETTER_PREFIX = "get"
BOOLEAN_GETTER_PREFIX = "is"

# Environment variables
ENV_PREFIX = "FIXTURE_KIT_"


class FixtureError(Exception):
    """Base class for every error raised by Fixture-Kit."""


class InstantiationError(FixtureError):
    """Raised when a target type cannot be default-constructed."""

    def __init__(self, target_type: Any, reason: str) -> None:
        self.target_type = target_type
        self.reason = reason
        super().__init__(f"Given class {target_type!r} can't be properly instantiated: {reason}")


class FieldAccessError(FixtureError):
    """Raised when a single attribute cannot be read or written."""

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Cannot access field '{field_name}': {reason}")


class AccessorVerificationError(FixtureError):
    """Base class for accessor verification failures."""


class AccessorInvocationError(AccessorVerificationError):
    """Raised when a getter or setter throws while being exercised."""

    def __init__(self, method_name: str, cause: BaseException) -> None:
        self.method_name = method_name
        self.cause = cause
        super().__init__(f"Method {method_name} raised {type(cause).__name__}: {cause}")


class AccessorMismatchError(AccessorVerificationError):
    """Raised when a getter does not return the value its setter received."""

    def __init__(self, field_name: str, method_name: str, expected: Any, actual: Any) -> None:
        self.field_name = field_name
        self.method_name = method_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"For method {method_name} -- expected <{expected}> but was <{actual}>")
