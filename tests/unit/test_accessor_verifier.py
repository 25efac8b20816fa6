"""
Unit tests for AccessorVerifier and the accessor resolvers.

Tests accessor pairing by convention and by property, the round-trip
comparison and the failures raised for broken accessors.
"""

import logging
from decimal import Decimal

import pytest

from fixture_kit.core.introspection import collect_fields
from fixture_kit.core.types import AccessorResolver
from fixture_kit.services.accessor_verifier import AccessorVerifier, VerificationRecord
from fixture_kit.utilities.accessors import ConventionAccessorResolver, PropertyAccessorResolver
from fixture_kit.utilities.constants import (
    AccessorInvocationError,
    AccessorMismatchError,
    AccessorVerificationError,
    InstantiationError,
)

from ..fixtures.sample_models import (
    ConstantGetterBean,
    Employee,
    LegacyBean,
    NeedsArguments,
    PartialBean,
    Person,
    PlainBean,
    PriceBean,
    RaisingGetterBean,
    RaisingSetterBean,
    WrongBooleanGetterBean,
)

VERIFIER_LOGGER = "fixture_kit.services.accessor_verifier"


def fields_by_name(cls, instance=None):
    return {field.name: field for field in collect_fields(cls, instance=instance)}


class TestConventionAccessorResolver:
    """Test cases for naming-convention pairing."""

    def test_snake_case_pair(self):
        resolver = ConventionAccessorResolver()
        pair = resolver.resolve(Person, fields_by_name(Person)["_name"])

        assert pair.getter_name == "get_name"
        assert pair.setter_name == "set_name"
        assert pair.value_type is str
        assert pair.setter_is_unary
        assert pair.is_complete
        assert pair.field_name == "_name"

    def test_boolean_uses_is_prefix(self):
        """Test boolean fields pair with an ``is`` getter."""
        pair = ConventionAccessorResolver().resolve(Person, fields_by_name(Person)["_active"])

        assert pair.getter_name == "is_active"
        assert pair.setter_name == "set_active"

    def test_camel_case_pair(self):
        """Test matching ignores case and underscores."""
        resolver = ConventionAccessorResolver()
        fields = fields_by_name(LegacyBean)

        assert resolver.resolve(LegacyBean, fields["title"]).getter_name == "getTitle"
        assert resolver.resolve(LegacyBean, fields["enabled"]).getter_name == "isEnabled"
        assert resolver.resolve(LegacyBean, fields["enabled"]).setter_name == "setEnabled"

    def test_inherited_accessors(self):
        pair = ConventionAccessorResolver().resolve(Employee, fields_by_name(Employee)["_age"])

        assert pair.is_complete

    def test_setter_parameter_count(self):
        """Test setters taking several arguments are recognized as such."""
        pair = ConventionAccessorResolver().resolve(
            PartialBean, fields_by_name(PartialBean)["_range"]
        )

        assert pair.setter_parameter_count == 2
        assert not pair.setter_is_unary

    def test_type_from_setter_hint(self):
        """Test unannotated fields take their type from the setter parameter."""
        field = fields_by_name(PlainBean, PlainBean())["color"]
        pair = ConventionAccessorResolver().resolve(PlainBean, field)

        assert pair.value_type is str

    def test_missing_accessors(self):
        resolver = ConventionAccessorResolver()
        fields = fields_by_name(PartialBean)

        assert not resolver.resolve(PartialBean, fields["_secret"]).has_getter
        assert not resolver.resolve(PartialBean, fields["_identifier"]).has_setter

    def test_implements_protocol(self):
        assert isinstance(ConventionAccessorResolver(), AccessorResolver)
        assert isinstance(PropertyAccessorResolver(), AccessorResolver)


class TestPropertyAccessorResolver:
    """Test cases for property-based pairing."""

    def test_property_pair(self):
        pair = PropertyAccessorResolver().resolve(PriceBean, fields_by_name(PriceBean)["_price"])

        assert pair.getter_name == "price"
        assert pair.setter_name == "price"
        assert pair.value_type is Decimal

    def test_no_property(self):
        pair = PropertyAccessorResolver().resolve(Person, fields_by_name(Person)["_name"])

        assert not pair.has_getter
        assert not pair.has_setter

    def test_verify_through_properties(self, synthesizer):
        verifier = AccessorVerifier(synthesizer=synthesizer, resolver=PropertyAccessorResolver())
        bean = PriceBean()

        report = verifier.verify(bean)

        assert report.verified_fields() == ["_price"]
        assert isinstance(bean.price, Decimal)


class TestRoundTrip:
    """Test cases for accessors that behave."""

    def test_conventional_bean(self, verifier):
        """Test every pair of a correct bean is compared."""
        report = verifier.verify(Person())

        assert report.verified_fields() == ["_name", "_age", "_active"]
        assert report.is_success()
        assert report.skipped_fields == []

    def test_values_are_written(self, verifier):
        """Test the random values stay on the instance after verification."""
        person = Person()
        verifier.verify(person)

        assert len(person.get_name()) == 25
        assert isinstance(person.is_active(), bool)

    def test_camel_case_bean(self, verifier):
        report = verifier.verify(LegacyBean())

        assert report.verified_fields() == ["title", "enabled"]

    def test_subclass_bean(self, verifier):
        report = verifier.verify(Employee())

        assert set(report.verified_fields()) == {"_name", "_age", "_active", "_salary"}

    def test_instance_attribute_bean(self, verifier):
        """Test undeclared attributes are verified using the setter's type."""
        report = verifier.verify(PlainBean())

        assert report.verified_fields() == ["color"]

    def test_missing_and_non_unary_accessors_are_skipped(self, verifier):
        """Test write-only, read-only and two-argument accessors are not errors."""
        report = verifier.verify(PartialBean())
        reasons = {skip.field_name: skip.reason for skip in report.skipped_fields}

        assert report.comparisons == []
        assert reasons == {
            "_secret": "no getter",
            "_identifier": "no setter",
            "_range": "setter set_range takes 2 parameters",
        }

    def test_boolean_with_get_prefix_is_not_compared(self, verifier):
        """Test a boolean exposed through ``get_`` has no matching getter."""
        report = verifier.verify(WrongBooleanGetterBean())

        assert report.comparisons == []
        assert report.skipped_fields[0].reason == "no getter"

    def test_none_instance(self, verifier):
        report = verifier.verify(None)

        assert report.comparisons == []
        assert report.is_success()

    def test_report_to_dict(self, verifier):
        data = verifier.verify(Person()).to_dict()

        assert data["type"] == "Person"
        assert [entry["method"] for entry in data["comparisons"]] == [
            "get_name",
            "get_age",
            "is_active",
        ]
        assert all(entry["matched"] for entry in data["comparisons"])


class TestFailures:
    """Test cases for accessors that break the contract."""

    def test_mismatch(self, verifier):
        """Test a getter returning another value fails with both values."""
        bean = ConstantGetterBean()

        with pytest.raises(AccessorMismatchError) as exc_info:
            verifier.verify(bean)

        error = exc_info.value
        assert error.field_name == "_code"
        assert error.method_name == "get_code"
        assert error.expected == bean._code
        assert error.actual == ConstantGetterBean.CONSTANT
        assert str(error).startswith("For method get_code -- expected <")

    def test_ignored_field_is_not_exercised(self, verifier):
        """Test a broken pair passes once its field is ignored."""
        report = verifier.verify(ConstantGetterBean(), ignored_field_names=["_code"])

        assert report.verified_fields() == ["_label"]

    def test_ignore_by_accessor_name(self, verifier):
        report = verifier.verify(ConstantGetterBean(), ignored_field_names="code")

        assert report.verified_fields() == ["_label"]

    def test_setter_raises(self, verifier):
        """Test a raising setter is reported with its name and cause."""
        with pytest.raises(AccessorInvocationError) as exc_info:
            verifier.verify(RaisingSetterBean())

        assert exc_info.value.method_name == "set_value"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_getter_raises(self, verifier):
        with pytest.raises(AccessorInvocationError) as exc_info:
            verifier.verify(RaisingGetterBean())

        assert exc_info.value.method_name == "get_value"
        assert isinstance(exc_info.value.cause, LookupError)

    def test_common_base_class(self, verifier):
        """Test both failures share one base class."""
        for bean in (ConstantGetterBean(), RaisingSetterBean()):
            with pytest.raises(AccessorVerificationError):
                verifier.verify(bean)


class TestComparisonLogging:
    """Test cases for the optional comparison log."""

    def test_comparisons_logged_on_request(self, verifier, caplog):
        caplog.set_level(logging.DEBUG, logger=VERIFIER_LOGGER)

        verifier.verify(Person(), log_comparisons=True)

        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("METHOD <get_name> : VALUE SET: ") for message in messages)
        assert any(" - VALUE GET : " in message for message in messages)

    def test_comparisons_not_logged_by_default(self, verifier, caplog):
        caplog.set_level(logging.DEBUG, logger=VERIFIER_LOGGER)

        verifier.verify(Person())

        assert not any(record.getMessage().startswith("METHOD") for record in caplog.records)

    def test_pair_summary_logged(self, verifier, caplog):
        """Test the count of complete accessor pairs is logged."""
        caplog.set_level(logging.DEBUG, logger=VERIFIER_LOGGER)

        verifier.verify(PartialBean())

        assert "Resolved 3 fields of PartialBean, 1 with getter and setter" in caplog.text


class TestVerifyClass:
    """Test cases for verification from a class."""

    def test_default_constructed(self, verifier):
        report = verifier.verify_class(Person)

        assert report.type_name == "Person"
        assert len(report.comparisons) == 3

    def test_class_needing_arguments(self, verifier):
        with pytest.raises(InstantiationError):
            verifier.verify_class(NeedsArguments)


class TestVerificationRecord:
    """Test cases for the value record."""

    def test_values_are_consumed_once(self):
        record = VerificationRecord()
        record.remember("_name", "value")

        assert "_name" in record
        assert len(record) == 1
        assert record.consume("_name") == "value"
        assert "_name" not in record
        with pytest.raises(KeyError):
            record.consume("_name")
