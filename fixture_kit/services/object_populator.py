"""
Object population service.

Builds an instance of an arbitrary class and assigns a random value to every
eligible field, recursing into nested composite types and collections within
the depth budget of a GenerationContext.
"""

import logging
import random
from collections.abc import Iterable, Sized
from dataclasses import replace
from typing import Any, TypeVar

from ..config import FixtureConfig, get_default_config
from ..core.introspection import collect_fields, instantiate
from ..core.results import FillResult
from ..domain.field_descriptor import FieldDescriptor
from ..domain.generation_context import GenerationContext
from ..domain.type_descriptor import TypeCategory, TypeDescriptor, describe_type
from ..utilities.constants import FieldAccessError, InstantiationError
from ..utilities.validators import normalize_field_names
from .value_synthesizer import ValueSynthesizer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ObjectPopulator:
    """
    Fills instances of arbitrary classes with random data.

    Scalars come from the ValueSynthesizer. Collections are created empty and
    receive a fixed number of generated elements while the collection budget
    allows it; maps are always left empty. A field that cannot be read or
    written is skipped and reported, the rest of the fill continues.
    """

    def __init__(
        self,
        synthesizer: ValueSynthesizer | None = None,
        config: FixtureConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the populator.

        Args:
            synthesizer: Scalar value source, created when omitted
            config: Generation policy, taken from the synthesizer when omitted
            rng: Random source for a synthesizer created here
        """
        if config is None:
            config = synthesizer.config if synthesizer else get_default_config()
        self.config = config
        self.synthesizer = synthesizer or ValueSynthesizer(rng=rng, config=config)
        self.synthesizer.attach_populator(self)

    def fill(
        self,
        cls: type[T] | None,
        max_depth: int | None = None,
        include_super_fields: bool = True,
        ignored_field_names: Iterable[str] | None = None,
    ) -> T | None:
        """
        Create an instance of ``cls`` with every field populated.

        Args:
            cls: Class to instantiate, None returns None
            max_depth: Collection depth budget, the configured default when omitted
            include_super_fields: Also fill fields declared by base classes
            ignored_field_names: Names of top-level fields to leave untouched

        Returns:
            The populated instance

        Raises:
            InstantiationError: If ``cls`` or a nested type cannot be built
        """
        result = self.fill_with_report(cls, max_depth, include_super_fields, ignored_field_names)
        return result.instance

    def fill_with_report(
        self,
        cls: type[T] | None,
        max_depth: int | None = None,
        include_super_fields: bool = True,
        ignored_field_names: Iterable[str] | None = None,
    ) -> FillResult[T | None]:
        """
        Create a populated instance and report the skipped fields.

        Same arguments and errors as :meth:`fill`.
        """
        result: FillResult[T | None] = FillResult(instance=None)
        if cls is None:
            return result

        context = GenerationContext(
            max_depth=self.config.default_max_depth if max_depth is None else max_depth,
            ignored_field_names=normalize_field_names(ignored_field_names),
        )
        result.instance = self._fill(cls, context, include_super_fields, result)

        if result.has_skips():
            logger.debug(f"Filled {cls.__name__} with skips: {result.get_skip_summary()}")
        return result

    def _fill(
        self,
        cls: type[T],
        context: GenerationContext,
        include_super_fields: bool,
        result: FillResult[Any],
    ) -> T:
        instance = instantiate(cls)
        context = context.enter(cls)
        fields = [
            field
            for field in collect_fields(cls, include_super_fields, instance=instance)
            if not context.is_ignored(field.name)
        ]
        logger.debug(
            f"Filling {cls.__name__}: {len(fields)} fields, {context.remaining_depth} "
            f"collection levels left, nesting {context.composite_depth}"
        )

        for field in fields:
            try:
                self._fill_field(instance, field, context, result)
            except FieldAccessError as e:
                logger.warning(f"### {e}")
                result.add_skip(field.name, field.declaring_type, e.reason)
        return instance

    def _fill_field(
        self,
        instance: Any,
        field: FieldDescriptor,
        context: GenerationContext,
        result: FillResult[Any],
    ) -> None:
        if field.annotation is None:
            self._fill_unannotated_field(instance, field, context, result)
            return

        descriptor = field.type

        if descriptor.is_container():
            current = field.read(instance)
            if not _is_empty(current):
                logger.debug(f"Keeping pre-populated {field}")
                return
            if descriptor.is_map():
                value = descriptor.concrete_type()()
            else:
                value = self._new_collection(field, descriptor, context, result)
            field.write(instance, value)
            return

        if descriptor.category is TypeCategory.COMPOSITE:
            field.write(instance, self._new_composite(field, descriptor, context, result))
            return

        value = self.synthesizer.synthesize_descriptor(descriptor)
        if value is None:
            result.add_skip(field.name, field.declaring_type, f"no random value for {descriptor}")
            return
        field.write(instance, value)

    def _fill_unannotated_field(
        self,
        instance: Any,
        field: FieldDescriptor,
        context: GenerationContext,
        result: FillResult[Any],
    ) -> None:
        current = field.read(instance)
        if current is None:
            result.add_skip(field.name, field.declaring_type, "no annotation and no value")
            return

        value_type = type(current)
        logger.debug(f"{field} is not annotated, typing it as {value_type.__name__}")
        try:
            self._fill_field(instance, replace(field, annotation=value_type), context, result)
        except InstantiationError as e:
            result.add_skip(
                field.name, field.declaring_type, f"cannot rebuild {value_type.__name__}: {e.reason}"
            )

    def _new_composite(
        self,
        field: FieldDescriptor,
        descriptor: TypeDescriptor,
        context: GenerationContext,
        result: FillResult[Any],
    ) -> Any:
        cls = descriptor.python_type
        if context.can_fill_composite(cls):
            return self._fill(cls, context.delegate(), False, result)

        logger.debug(f"{field} refers back to {cls.__name__}, default-constructing it")
        result.add_skip(
            field.name, field.declaring_type, f"cyclic reference to {cls.__name__}, left unfilled"
        )
        return instantiate(cls)

    def _new_collection(
        self,
        field: FieldDescriptor,
        descriptor: TypeDescriptor,
        context: GenerationContext,
        result: FillResult[Any],
    ) -> Any:
        concrete = descriptor.concrete_type()
        elements: list[Any] = []

        if context.can_expand_collections:
            if descriptor.has_element_type():
                element_type = describe_type(descriptor.element_type)
                elements = self._new_elements(field, element_type, context, result)
            else:
                logger.debug(f"Element type of {field} is unknown, leaving it empty")

        try:
            if issubclass(concrete, (tuple, frozenset)):
                return concrete(elements)
            collection = concrete()
            if hasattr(collection, "extend"):
                collection.extend(elements)
            else:
                for element in elements:
                    collection.add(element)
            return collection
        except TypeError as e:
            raise FieldAccessError(field.name, f"cannot build {concrete.__name__}: {e}") from e

    def _new_elements(
        self,
        field: FieldDescriptor,
        element: TypeDescriptor,
        context: GenerationContext,
        result: FillResult[Any],
    ) -> list[Any]:
        if not element.is_supported():
            logger.warning(
                f"No random value possible for elements of {field}: {element.annotation!r}"
            )
            return []

        nested = context.descend()
        elements = []
        for _ in range(self.config.collection_size):
            if element.category is TypeCategory.COMPOSITE:
                elements.append(self._fill(element.python_type, nested, True, result))
            else:
                elements.append(self.synthesizer.synthesize_descriptor(element))
        return elements


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, Sized) and len(value) == 0)
