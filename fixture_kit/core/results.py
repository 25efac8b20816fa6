"""
Result types for fill and verification operations.

Skipped fields and value comparisons are returned to the caller so tests can
assert on them instead of reading the log.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SkippedField:
    """A field left untouched, with the reason."""

    field_name: str
    declaring_type: str
    reason: str

    def __str__(self) -> str:
        return f"{self.declaring_type}.{self.field_name}: {self.reason}"


@dataclass
class FillResult(Generic[T]):
    """Instance produced by a fill, with the fields that had to be skipped."""

    instance: T
    skipped_fields: list[SkippedField] = field(default_factory=list)

    def add_skip(self, field_name: str, declaring_type: type, reason: str) -> None:
        """Record a skipped field."""
        self.skipped_fields.append(SkippedField(field_name, declaring_type.__name__, reason))

    def has_skips(self) -> bool:
        return len(self.skipped_fields) > 0

    def skipped_names(self) -> list[str]:
        """Get the names of all skipped fields."""
        return [skip.field_name for skip in self.skipped_fields]

    def get_skip_summary(self) -> str:
        return "; ".join(str(skip) for skip in self.skipped_fields)


@dataclass(frozen=True)
class ComparisonRecord:
    """One getter read compared against the value its setter received."""

    field_name: str
    method_name: str
    expected: Any
    actual: Any

    @property
    def matched(self) -> bool:
        return bool(self.expected == self.actual)


@dataclass
class VerificationReport:
    """Outcome of an accessor verification that did not fail."""

    type_name: str
    comparisons: list[ComparisonRecord] = field(default_factory=list)
    skipped_fields: list[SkippedField] = field(default_factory=list)

    def add_comparison(self, record: ComparisonRecord) -> None:
        self.comparisons.append(record)

    def add_skip(self, field_name: str, declaring_type: type, reason: str) -> None:
        """Record a field that was not exercised."""
        self.skipped_fields.append(SkippedField(field_name, declaring_type.__name__, reason))

    def verified_fields(self) -> list[str]:
        """Get the names of the fields whose getter was compared."""
        return [record.field_name for record in self.comparisons]

    def is_success(self) -> bool:
        return all(record.matched for record in self.comparisons)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary representation."""
        return {
            "type": self.type_name,
            "comparisons": [
                {
                    "field": record.field_name,
                    "method": record.method_name,
                    "expected": record.expected,
                    "actual": record.actual,
                    "matched": record.matched,
                }
                for record in self.comparisons
            ],
            "skipped": [str(skip) for skip in self.skipped_fields],
        }
