"""
GenerationContext value object controlling one population call.

Holds the recursion budget and the exclusion set for a single top-level fill.
"""

from dataclasses import dataclass, field, replace

from ..utilities.validators import validate_non_negative_int


@dataclass(frozen=True)
class GenerationContext:
    """
    Immutable recursion state for a fill.

    - ``current_depth`` counts collection expansions. Elements are generated
      only while it is below ``max_depth`` and each element level adds one.
    - ``filling`` is the chain of classes currently being filled, outermost
      first. Composite fields are filled recursively at any nesting level
      unless their class is already in the chain, which ends cycles such
      as a node referencing its own type. Composite instances get no
      collection budget of their own.

    Ignored field names apply to the top-level type only.
    """

    max_depth: int = 0
    current_depth: int = 0
    ignored_field_names: frozenset[str] = field(default_factory=frozenset)
    filling: tuple[type, ...] = ()

    def __post_init__(self) -> None:
        """Validate the depth budget."""
        validate_non_negative_int(self.max_depth, "max_depth")
        validate_non_negative_int(self.current_depth, "current_depth")
        if self.current_depth > self.max_depth:
            raise ValueError(
                f"current_depth ({self.current_depth}) cannot exceed max_depth ({self.max_depth})"
            )

    @property
    def can_expand_collections(self) -> bool:
        """Check if collection elements may still be generated."""
        return self.current_depth < self.max_depth

    @property
    def remaining_depth(self) -> int:
        return self.max_depth - self.current_depth

    @property
    def composite_depth(self) -> int:
        """Number of enclosing instances being filled."""
        return len(self.filling)

    def can_fill_composite(self, cls: type) -> bool:
        """Check if a composite of ``cls`` may be filled without closing a cycle."""
        return cls not in self.filling

    def is_ignored(self, field_name: str) -> bool:
        """Check if a field is excluded from population."""
        return field_name in self.ignored_field_names

    def enter(self, cls: type) -> "GenerationContext":
        """Create the context used while filling the fields of ``cls``."""
        if cls in self.filling:
            return self
        return replace(self, filling=self.filling + (cls,))

    def descend(self) -> "GenerationContext":
        """
        Create the context used for collection elements.

        Raises:
            ValueError: If the collection budget is already exhausted
        """
        return replace(self, current_depth=self.current_depth + 1, ignored_field_names=frozenset())

    def delegate(self) -> "GenerationContext":
        """Create the context used for a composite field value."""
        return replace(self, current_depth=self.max_depth, ignored_field_names=frozenset())
