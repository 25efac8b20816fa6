"""
Fixture-Kit - random test fixtures and accessor contract checks.

This package provides:
- Random values for scalar, temporal, enum and container types
- Fully populated instances of arbitrary classes, with a depth budget
- Verification that getters return what setters received

Nothing here touches the network or the file system; everything runs
in-process from test code.
"""

__version__ = "1.0.0"
__author__ = "Fixture-Kit Developers"
__description__ = "Random test fixtures and accessor verification for Python classes"

from .config import Environment, FixtureConfig, configure_logging, get_environment_config
from .core.fixture_facade import (
    FixtureFacade,
    create_fixture_facade,
    fill,
    fill_with_report,
    random_value,
    verify_accessors,
    verify_class_accessors,
)
from .core.results import ComparisonRecord, FillResult, SkippedField, VerificationReport
from .domain.type_descriptor import BigInteger, Byte, Char, Float32, Int32, Long, Short
from .utilities.accessors import ConventionAccessorResolver, PropertyAccessorResolver
from .utilities.constants import (
    AccessorInvocationError,
    AccessorMismatchError,
    AccessorVerificationError,
    FieldAccessError,
    FixtureError,
    InstantiationError,
)
from .utilities.field_supplier import FieldSupplier, field_supplier
from .utilities.reporting import render_fill_report, render_verification_report

__all__ = [
    "AccessorInvocationError",
    "AccessorMismatchError",
    "AccessorVerificationError",
    "BigInteger",
    "Byte",
    "Char",
    "ComparisonRecord",
    "ConventionAccessorResolver",
    "Environment",
    "FieldAccessError",
    "FieldSupplier",
    "FillResult",
    "FixtureConfig",
    "FixtureError",
    "FixtureFacade",
    "Float32",
    "InstantiationError",
    "Int32",
    "Long",
    "PropertyAccessorResolver",
    "Short",
    "SkippedField",
    "VerificationReport",
    "configure_logging",
    "create_fixture_facade",
    "field_supplier",
    "fill",
    "fill_with_report",
    "get_environment_config",
    "random_value",
    "render_fill_report",
    "render_verification_report",
    "verify_accessors",
    "verify_class_accessors",
]
