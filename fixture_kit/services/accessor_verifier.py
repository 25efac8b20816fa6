"""
Accessor contract verification service.

Writes a random value through every discoverable setter of an object, reads
it back through the matching getter and fails on the first value that does
not round-trip.
"""

import logging
from collections.abc import Iterable
from typing import Any

from ..config import FixtureConfig, get_default_config
from ..core.introspection import collect_fields, instantiate
from ..core.results import ComparisonRecord, VerificationReport
from ..core.types import AccessorResolver, ValueSource
from ..domain.accessor_pair import AccessorPair
from ..utilities.accessors import ConventionAccessorResolver
from ..utilities.constants import AccessorInvocationError, AccessorMismatchError
from ..utilities.validators import normalize_field_names
from .value_synthesizer import ValueSynthesizer

logger = logging.getLogger(__name__)


class VerificationRecord:
    """
    Values written by the setter pass, keyed by field name.

    Each value is consumed by exactly one getter comparison.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def remember(self, field_name: str, value: Any) -> None:
        self._values[field_name] = value

    def consume(self, field_name: str) -> Any:
        """Remove and return the value written for a field."""
        return self._values.pop(field_name)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._values

    def __len__(self) -> int:
        return len(self._values)


class AccessorVerifier:
    """
    Verifies that getters return what setters received.

    Pairs are discovered by an AccessorResolver, bean-style naming by
    default. Fields without a setter are not exercised and fields without a
    getter are not compared; neither is an error. An accessor that raises
    and a getter returning a different value both fail the verification.
    """

    def __init__(
        self,
        synthesizer: ValueSource | None = None,
        resolver: AccessorResolver | None = None,
        config: FixtureConfig | None = None,
    ) -> None:
        """
        Initialize the verifier.

        Args:
            synthesizer: Source of the values written through setters
            resolver: Accessor pairing strategy
            config: Policy providing the default for comparison logging
        """
        self.config = config or get_default_config()
        self.synthesizer = synthesizer or ValueSynthesizer(config=self.config)
        self.resolver = resolver or ConventionAccessorResolver()

    def verify(
        self,
        instance: Any,
        ignored_field_names: Iterable[str] | None = None,
        log_comparisons: bool | None = None,
    ) -> VerificationReport:
        """
        Exercise every accessor pair of an instance.

        Args:
            instance: Object under test, None verifies nothing
            ignored_field_names: Fields never exercised
            log_comparisons: Log every comparison at DEBUG level

        Returns:
            Report of the comparisons made and the fields skipped

        Raises:
            AccessorMismatchError: On the first getter returning another value
            AccessorInvocationError: If a getter or setter raises
        """
        if instance is None:
            return VerificationReport(type_name=type(None).__name__)
        if log_comparisons is None:
            log_comparisons = self.config.log_comparisons

        cls = type(instance)
        ignored = normalize_field_names(ignored_field_names)
        fields = [
            field
            for field in collect_fields(cls, True, ignored, instance=instance)
            if field.accessor_name not in ignored
        ]
        pairs = [self.resolver.resolve(cls, field) for field in fields]
        logger.debug(
            f"Resolved {len(pairs)} fields of {cls.__name__}, "
            f"{sum(pair.is_complete for pair in pairs)} with getter and setter"
        )

        report = VerificationReport(type_name=cls.__name__)
        record = VerificationRecord()
        self._set_all(instance, pairs, record, report)
        self._get_all(instance, pairs, record, report, log_comparisons)

        logger.debug(
            f"Verified {len(report.comparisons)} accessors of {cls.__name__}, "
            f"{len(report.skipped_fields)} fields skipped"
        )
        return report

    def verify_class(
        self,
        cls: type,
        ignored_field_names: Iterable[str] | None = None,
        log_comparisons: bool | None = None,
    ) -> VerificationReport:
        """
        Default-construct ``cls`` and verify the new instance.

        Raises:
            InstantiationError: If ``cls`` cannot be default-constructed
        """
        return self.verify(instantiate(cls), ignored_field_names, log_comparisons)

    def _set_all(
        self,
        instance: Any,
        pairs: list[AccessorPair],
        record: VerificationRecord,
        report: VerificationReport,
    ) -> None:
        for pair in pairs:
            field = pair.field
            if not pair.has_setter:
                report.add_skip(field.name, field.declaring_type, "no setter")
                continue
            if not pair.setter_is_unary:
                report.add_skip(
                    field.name,
                    field.declaring_type,
                    f"setter {pair.setter_name} takes {pair.setter_parameter_count} parameters",
                )
                continue

            value = self.synthesizer.synthesize(pair.value_type)
            try:
                self.resolver.invoke_setter(instance, pair, value)
            except Exception as e:
                raise AccessorInvocationError(pair.setter_name, e) from e
            record.remember(pair.field_name, value)

    def _get_all(
        self,
        instance: Any,
        pairs: list[AccessorPair],
        record: VerificationRecord,
        report: VerificationReport,
        log_comparisons: bool,
    ) -> None:
        for pair in pairs:
            field = pair.field
            if pair.field_name not in record:
                continue
            if not pair.has_getter:
                report.add_skip(field.name, field.declaring_type, "no getter")
                continue

            expected = record.consume(pair.field_name)
            try:
                actual = self.resolver.invoke_getter(instance, pair)
            except Exception as e:
                raise AccessorInvocationError(pair.getter_name, e) from e

            comparison = ComparisonRecord(field.name, pair.getter_name, expected, actual)
            report.add_comparison(comparison)
            if log_comparisons:
                logger.debug(
                    f"METHOD <{pair.getter_name}> : VALUE SET: {expected} - VALUE GET : {actual}"
                )
            if not comparison.matched:
                raise AccessorMismatchError(field.name, pair.getter_name, expected, actual)
