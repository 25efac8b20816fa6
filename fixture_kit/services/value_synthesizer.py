"""
Random value synthesis for a single type.

Produces one random value per request following a fixed policy per
TypeCategory. Types no value can be produced for yield None; that outcome is
logged, never raised.
"""

import datetime
import logging
import random
import struct
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from ..config import FixtureConfig, get_default_config
from ..domain.type_descriptor import TypeCategory, TypeDescriptor, describe_type
from ..utilities.constants import (
    INT8_MAX,
    INT16_MAX,
    INT32_MAX,
    INT64_MAX,
    INT64_MIN,
    PRINTABLE_ASCII_MAX,
    PRINTABLE_ASCII_MIN,
)

if TYPE_CHECKING:
    from .object_populator import ObjectPopulator

logger = logging.getLogger(__name__)

_EPOCH = datetime.datetime(1970, 1, 1)
_MIN_OFFSET_MS = (datetime.datetime.min - _EPOCH) // datetime.timedelta(milliseconds=1)
_MAX_OFFSET_MS = (datetime.datetime.max - _EPOCH) // datetime.timedelta(milliseconds=1)

_PRINTABLE_ASCII = "".join(
    chr(code) for code in range(PRINTABLE_ASCII_MIN, PRINTABLE_ASCII_MAX + 1)
)


class ValueSynthesizer:
    """
    Generates random values by type category.

    Each synthesizer owns its random source, so independent synthesizers can
    be used from different threads. Composite types are delegated to an
    ObjectPopulator with a fresh depth budget of zero.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        config: FixtureConfig | None = None,
        populator: "ObjectPopulator | None" = None,
    ) -> None:
        """
        Initialize the synthesizer.

        Args:
            rng: Random source, a new unseeded one when omitted
            config: Generation policy, environment defaults when omitted
            populator: Populator used for composite types
        """
        self.rng = rng or random.Random()
        self.config = config or get_default_config()
        self._populator = populator

        self._generators = {
            TypeCategory.STRING: self._random_string,
            TypeCategory.CHARACTER: self._random_character,
            TypeCategory.BOOLEAN: self._random_boolean,
            TypeCategory.INT8: lambda d: self._random_int(d, INT8_MAX),
            TypeCategory.INT16: lambda d: self._random_int(d, INT16_MAX),
            TypeCategory.INT32: lambda d: self._random_int(d, INT32_MAX),
            TypeCategory.INT64: self._random_long,
            TypeCategory.BIG_INTEGER: lambda d: self._random_int(d, INT32_MAX),
            TypeCategory.NUMBER: lambda d: self.rng.randint(0, INT8_MAX),
            TypeCategory.FLOAT32: self._random_float32,
            TypeCategory.FLOAT64: self._random_float64,
            TypeCategory.DECIMAL: self._random_decimal,
            TypeCategory.DATETIME: self._random_datetime,
            TypeCategory.ENUM: self._random_enum,
            TypeCategory.COLLECTION: self._empty_container,
            TypeCategory.MAP: self._empty_container,
            TypeCategory.COMPOSITE: self._fill_composite,
        }

    @property
    def populator(self) -> "ObjectPopulator":
        """Populator used for composite types, created on first use."""
        if self._populator is None:
            from .object_populator import ObjectPopulator

            self._populator = ObjectPopulator(synthesizer=self, config=self.config)
        return self._populator

    def attach_populator(self, populator: "ObjectPopulator") -> None:
        self._populator = populator

    def synthesize(self, annotation: Any) -> Any:
        """
        Produce a random value for an annotation.

        Args:
            annotation: Class or typing construct, None is accepted

        Returns:
            A value of the requested type, or None when unsupported

        Raises:
            InstantiationError: If a composite type cannot be built
        """
        if annotation is None:
            return None
        return self.synthesize_descriptor(describe_type(annotation))

    def synthesize_descriptor(self, descriptor: TypeDescriptor) -> Any:
        """Produce a random value for an already classified type."""
        generator = self._generators.get(descriptor.category)
        if generator is None:
            logger.warning(f"No random value possible for : {descriptor.annotation!r}")
            return None
        return generator(descriptor)

    def _random_string(self, descriptor: TypeDescriptor) -> str:
        text = "".join(self.rng.choices(_PRINTABLE_ASCII, k=self.config.string_length))
        return text if descriptor.python_type is str else descriptor.python_type(text)

    def _random_character(self, descriptor: TypeDescriptor) -> str:
        return self.rng.choice(_PRINTABLE_ASCII)

    def _random_boolean(self, descriptor: TypeDescriptor) -> bool:
        return self.rng.random() < 0.5

    def _random_int(self, descriptor: TypeDescriptor, upper: int) -> int:
        value = self.rng.randint(0, upper)
        python_type = descriptor.python_type
        return value if python_type in (int, None) else python_type(value)

    def _random_long(self, descriptor: TypeDescriptor) -> int:
        return self.rng.randint(INT64_MIN, INT64_MAX)

    def _random_fraction(self) -> float:
        """Fraction in [0, 1) scaled by an integer in [0, bound)."""
        return self.rng.random() * self.rng.randrange(self.config.float_multiplier_bound)

    def _random_float64(self, descriptor: TypeDescriptor) -> float:
        value = self._random_fraction()
        python_type = descriptor.python_type
        return value if python_type in (float, None) else python_type(value)

    def _random_float32(self, descriptor: TypeDescriptor) -> float:
        return struct.unpack("f", struct.pack("f", self._random_fraction()))[0]

    def _random_decimal(self, descriptor: TypeDescriptor) -> Decimal:
        return descriptor.python_type(repr(self._random_fraction()))

    def _random_datetime(self, descriptor: TypeDescriptor) -> datetime.date:
        offset = self.rng.randint(_MIN_OFFSET_MS, _MAX_OFFSET_MS)
        value = _EPOCH + datetime.timedelta(milliseconds=offset)
        if issubclass(descriptor.python_type, datetime.datetime):
            return value
        return value.date()

    def _random_enum(self, descriptor: TypeDescriptor) -> Any:
        members = list(descriptor.python_type)
        if not members:
            logger.warning(f"No random value possible for empty enum : {descriptor.python_type!r}")
            return None
        return self.rng.choice(members)

    def _empty_container(self, descriptor: TypeDescriptor) -> Any:
        return descriptor.concrete_type()()

    def _fill_composite(self, descriptor: TypeDescriptor) -> Any:
        return self.populator.fill(descriptor.python_type, max_depth=0, include_super_fields=False)
