"""
Property-based tests for value synthesis, population and verification.

Uses Hypothesis to drive the random source, the depth budget and the
configuration, and checks the invariants that must hold for every draw.
"""

import datetime
import struct
from decimal import Decimal

from hypothesis import given, settings
from hypothesis import strategies as st

from fixture_kit.config import FixtureConfig
from fixture_kit.domain.generation_context import GenerationContext
from fixture_kit.domain.type_descriptor import (
    BigInteger,
    Byte,
    Char,
    Float32,
    Long,
    Short,
    describe_type,
)
from fixture_kit.services.accessor_verifier import AccessorVerifier
from fixture_kit.services.object_populator import ObjectPopulator
from fixture_kit.services.value_synthesizer import ValueSynthesizer
from fixture_kit.utilities.constants import INT8_MAX, INT16_MAX, INT32_MAX, INT64_MAX, INT64_MIN

from ..fixtures.sample_models import Color, Container, Data, Employee, LegacyBean, Person, Point

BOUNDED_INTEGERS = {
    Byte: (0, INT8_MAX),
    Short: (0, INT16_MAX),
    int: (0, INT32_MAX),
    BigInteger: (0, INT32_MAX),
    Long: (INT64_MIN, INT64_MAX),
}


@st.composite
def configs(draw):
    """Generate small generation policies."""
    return FixtureConfig(
        string_length=draw(st.integers(min_value=0, max_value=40)),
        collection_size=draw(st.integers(min_value=0, max_value=4)),
        float_multiplier_bound=draw(st.integers(min_value=1, max_value=10**6)),
    )


@st.composite
def contexts(draw):
    """Generate valid generation contexts."""
    max_depth = draw(st.integers(min_value=0, max_value=5))
    current_depth = draw(st.integers(min_value=0, max_value=max_depth))
    filling = draw(st.lists(st.sampled_from([Container, Data, Person, Point]), unique=True))
    return GenerationContext(
        max_depth=max_depth, current_depth=current_depth, filling=tuple(filling)
    )


def collection_depth(data: Data) -> int:
    """Number of populated list levels below ``data``."""
    depth = 0
    while data.a_list:
        depth += 1
        data = data.a_list[0]
    return depth


class TestSynthesisProperties:
    """Property-based tests for ValueSynthesizer."""

    @given(
        rng=st.randoms(use_true_random=False),
        annotation=st.sampled_from(list(BOUNDED_INTEGERS)),
    )
    def test_integers_within_bounds(self, rng, annotation):
        """Test every integer width stays within its range."""
        low, high = BOUNDED_INTEGERS[annotation]
        value = ValueSynthesizer(rng, FixtureConfig()).synthesize(annotation)

        assert low <= value <= high

    @given(rng=st.randoms(use_true_random=False), config=configs())
    def test_string_shape(self, rng, config):
        """Test strings follow the configured length and alphabet."""
        value = ValueSynthesizer(rng, config).synthesize(str)

        assert len(value) == config.string_length
        assert all(" " <= char <= "~" for char in value)

    @given(rng=st.randoms(use_true_random=False), config=configs())
    def test_fractional_bounds(self, rng, config):
        """Test floats and decimals stay below the multiplier bound."""
        synthesizer = ValueSynthesizer(rng, config)
        bound = config.float_multiplier_bound

        assert 0.0 <= synthesizer.synthesize(float) < bound
        assert Decimal(0) <= synthesizer.synthesize(Decimal) < bound

    @given(rng=st.randoms(use_true_random=False))
    def test_float32_round_trip(self, rng):
        value = ValueSynthesizer(rng, FixtureConfig()).synthesize(Float32)

        assert struct.unpack("f", struct.pack("f", value))[0] == value

    @given(
        rng=st.randoms(use_true_random=False),
        annotation=st.sampled_from(
            [str, Char, bool, float, Decimal, datetime.datetime, datetime.date, Color]
        ),
    )
    def test_value_matches_declared_type(self, rng, annotation):
        """Test every supported scalar yields an instance of its runtime type."""
        value = ValueSynthesizer(rng, FixtureConfig()).synthesize(annotation)

        assert isinstance(value, describe_type(annotation).python_type)


class TestContextProperties:
    """Property-based tests for GenerationContext."""

    @given(context=contexts())
    def test_delegate_never_expands_collections(self, context):
        delegated = context.delegate()

        assert not delegated.can_expand_collections
        assert delegated.filling == context.filling
        assert delegated.max_depth == context.max_depth

    @given(context=contexts())
    def test_descend_until_exhausted(self, context):
        """Test descending always reaches an exhausted budget in remaining_depth steps."""
        steps = 0
        while context.can_expand_collections:
            context = context.descend()
            steps += 1

        assert context.remaining_depth == 0
        assert steps <= 5

    @given(context=contexts(), cls=st.sampled_from([Container, Data, Person, Point, Employee]))
    def test_entered_types_are_never_refilled(self, context, cls):
        """Test a type can be filled below itself only until it is entered."""
        entered = context.enter(cls)

        assert not entered.delegate().can_fill_composite(cls)
        assert context.can_fill_composite(cls) == (cls not in context.filling)


class TestPopulationProperties:
    """Property-based tests for ObjectPopulator."""

    @settings(max_examples=20, deadline=None)
    @given(max_depth=st.integers(min_value=0, max_value=3), config=configs())
    def test_collection_depth_follows_budget(self, max_depth, config):
        """Test lists are populated exactly max_depth levels deep."""
        populator = ObjectPopulator(config=config.with_overrides(collection_size=2))
        data = populator.fill(Data, max_depth=max_depth)

        assert collection_depth(data) == max_depth
        assert data.a_map == {}

    @settings(max_examples=30, deadline=None)
    @given(config=configs())
    def test_collection_size_follows_config(self, config):
        container = ObjectPopulator(config=config).fill(Container, max_depth=1)

        assert len(container.items) == config.collection_size

    @given(ignored=st.sets(st.sampled_from(["x", "y"])))
    def test_ignored_fields_are_untouched(self, ignored):
        point = ObjectPopulator(config=FixtureConfig()).fill(Point, ignored_field_names=ignored)

        for name in ("x", "y"):
            value = getattr(point, name)
            assert (value is None) == (name in ignored)


class TestVerificationProperties:
    """Property-based tests for AccessorVerifier."""

    @settings(max_examples=50)
    @given(
        rng=st.randoms(use_true_random=False),
        bean_class=st.sampled_from([Person, Employee, LegacyBean]),
    )
    def test_correct_beans_always_verify(self, rng, bean_class):
        """Test well-behaved accessors pass for every random draw."""
        config = FixtureConfig()
        verifier = AccessorVerifier(synthesizer=ValueSynthesizer(rng, config), config=config)

        report = verifier.verify(bean_class())

        assert report.is_success()
        assert len(report.comparisons) >= 2
