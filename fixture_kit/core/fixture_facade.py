"""
Fixture facade that provides the public entry points.

Coordinates the synthesizer, the populator and the accessor verifier behind a
small set of functions meant to be called directly from test code.
"""

import random
from collections.abc import Iterable
from typing import Any, TypeVar

from ..config import FixtureConfig, get_default_config
from ..services.accessor_verifier import AccessorVerifier
from ..services.object_populator import ObjectPopulator
from ..services.value_synthesizer import ValueSynthesizer
from .results import FillResult, VerificationReport
from .types import AccessorResolver

T = TypeVar("T")


class FixtureFacade:
    """
    Unified interface to value synthesis, population and verification.

    All three services share one synthesizer, hence one random source.
    """

    def __init__(
        self,
        config: FixtureConfig | None = None,
        rng: random.Random | None = None,
        resolver: AccessorResolver | None = None,
    ) -> None:
        """Initialize the facade and wire its services together."""
        self.config = config or get_default_config()
        self.synthesizer = ValueSynthesizer(rng=rng, config=self.config)
        self.populator = ObjectPopulator(synthesizer=self.synthesizer, config=self.config)
        self.verifier = AccessorVerifier(
            synthesizer=self.synthesizer, resolver=resolver, config=self.config
        )

    def random_value(self, annotation: Any) -> Any:
        """Get a random value for a type, None when unsupported."""
        return self.synthesizer.synthesize(annotation)

    def fill(
        self,
        cls: type[T] | None,
        max_depth: int | None = None,
        include_super_fields: bool = True,
        ignored_field_names: Iterable[str] | None = None,
    ) -> T | None:
        """Get an instance of ``cls`` with every field populated."""
        return self.populator.fill(cls, max_depth, include_super_fields, ignored_field_names)

    def fill_with_report(
        self,
        cls: type[T] | None,
        max_depth: int | None = None,
        include_super_fields: bool = True,
        ignored_field_names: Iterable[str] | None = None,
    ) -> FillResult[T | None]:
        """Get a populated instance together with the fields that were skipped."""
        return self.populator.fill_with_report(
            cls, max_depth, include_super_fields, ignored_field_names
        )

    def verify_accessors(
        self,
        instance: Any,
        ignored_field_names: Iterable[str] | None = None,
        log_comparisons: bool | None = None,
    ) -> bool:
        """
        Check that every getter of ``instance`` returns what its setter received.

        Returns:
            True when every accessor pair round-trips

        Raises:
            AccessorVerificationError: On the first failing accessor
        """
        self.verifier.verify(instance, ignored_field_names, log_comparisons)
        return True

    def verify_accessors_with_report(
        self,
        instance: Any,
        ignored_field_names: Iterable[str] | None = None,
        log_comparisons: bool | None = None,
    ) -> VerificationReport:
        return self.verifier.verify(instance, ignored_field_names, log_comparisons)

    def verify_class_accessors(
        self,
        cls: type,
        ignored_field_names: Iterable[str] | None = None,
        log_comparisons: bool | None = None,
    ) -> bool:
        """Default-construct ``cls`` and verify the accessors of the new instance."""
        self.verifier.verify_class(cls, ignored_field_names, log_comparisons)
        return True


def create_fixture_facade(
    config: FixtureConfig | None = None,
    rng: random.Random | None = None,
    resolver: AccessorResolver | None = None,
) -> FixtureFacade:
    """
    Factory function to create a fixture facade.

    Args:
        config: Generation policy, environment defaults when omitted
        rng: Shared random source
        resolver: Accessor pairing strategy for verification

    Returns:
        FixtureFacade with coordinated services
    """
    return FixtureFacade(config, rng, resolver)


def fill(
    cls: type[T] | None,
    max_depth: int | None = None,
    include_super_fields: bool = True,
    ignored_field_names: Iterable[str] | None = None,
) -> T | None:
    """
    Get an instance of ``cls`` with every field filled with random values.

    Args:
        cls: Class to instantiate
        max_depth: Depth until which collections get elements (default 0)
        include_super_fields: Also fill fields declared by base classes
        ignored_field_names: Fields to leave untouched

    Raises:
        InstantiationError: If ``cls`` or a nested type cannot be built
    """
    return create_fixture_facade().fill(cls, max_depth, include_super_fields, ignored_field_names)


def fill_with_report(
    cls: type[T] | None,
    max_depth: int | None = None,
    include_super_fields: bool = True,
    ignored_field_names: Iterable[str] | None = None,
) -> FillResult[T | None]:
    """Same as :func:`fill`, also returning the fields that were skipped."""
    return create_fixture_facade().fill_with_report(
        cls, max_depth, include_super_fields, ignored_field_names
    )


def random_value(annotation: Any) -> Any:
    """Get a random value for a type, None when no value can be produced."""
    return create_fixture_facade().random_value(annotation)


def verify_accessors(
    instance: Any,
    ignored_field_names: Iterable[str] | None = None,
    log_comparisons: bool | None = None,
    resolver: AccessorResolver | None = None,
) -> bool:
    """
    Set random values through the setters of ``instance`` and read them back.

    Raises:
        AccessorMismatchError: If a getter returns another value than was set
        AccessorInvocationError: If an accessor raises
    """
    facade = create_fixture_facade(resolver=resolver)
    return facade.verify_accessors(instance, ignored_field_names, log_comparisons)


def verify_class_accessors(
    cls: type,
    ignored_field_names: Iterable[str] | None = None,
    log_comparisons: bool | None = None,
    resolver: AccessorResolver | None = None,
) -> bool:
    """Default-construct ``cls`` and verify its accessors."""
    facade = create_fixture_facade(resolver=resolver)
    return facade.verify_class_accessors(cls, ignored_field_names, log_comparisons)
