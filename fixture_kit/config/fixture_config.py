"""
Generation policy configuration.

Groups the constants that drive value synthesis and population into one
immutable object so tests can run with a narrower policy when needed.
"""

from dataclasses import dataclass, replace

from ..utilities.constants import (
    DEFAULT_COLLECTION_SIZE,
    DEFAULT_MAX_DEPTH,
    DEFAULT_STRING_LENGTH,
    FLOAT_MULTIPLIER_BOUND,
)
from ..utilities.validators import validate_non_negative_int


@dataclass(frozen=True)
class FixtureConfig:
    """Immutable generation and verification policy."""

    string_length: int = DEFAULT_STRING_LENGTH
    collection_size: int = DEFAULT_COLLECTION_SIZE
    float_multiplier_bound: int = FLOAT_MULTIPLIER_BOUND
    default_max_depth: int = DEFAULT_MAX_DEPTH
    log_comparisons: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        validate_non_negative_int(self.string_length, "string_length")
        validate_non_negative_int(self.collection_size, "collection_size")
        validate_non_negative_int(self.default_max_depth, "default_max_depth")
        validate_non_negative_int(self.float_multiplier_bound, "float_multiplier_bound")
        if self.float_multiplier_bound == 0:
            raise ValueError("float_multiplier_bound must be positive")

    def with_overrides(self, **overrides) -> "FixtureConfig":
        """Create a copy with some values replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, object]:
        """Convert configuration to dictionary representation."""
        return {
            "string_length": self.string_length,
            "collection_size": self.collection_size,
            "float_multiplier_bound": self.float_multiplier_bound,
            "default_max_depth": self.default_max_depth,
            "log_comparisons": self.log_comparisons,
            "log_level": self.log_level,
        }
