"""Attribute classification, merging and layout decisions for builders.

A builder exposes the parameters of its operation together with the fields
of its object. This module merges both sources into one ordered list of
uniquely named attributes and decides whether the builder needs a separate
container struct to hold its state.
"""

import dataclasses
import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from itertools import chain
from typing import TYPE_CHECKING

from crabgen.codegen.models import ObjectField, Parameter
from crabgen.codegen.naming import struct_name
from crabgen.codegen.utils import to_snake_case
from crabgen.exceptions import AttributeCollisionError

if TYPE_CHECKING:
    from crabgen.codegen.builders.deriver import ApiObjectBuilder

__all__ = [
    'Property',
    'Attribute',
    'merge_attributes',
    'required_attributes',
    'needs_container',
    'has_fields',
]

logger = logging.getLogger(__name__)


class Property(Enum):
    """Role an attribute plays in a builder."""

    REQUIRED_FIELD = 'required field'
    OPTIONAL_FIELD = 'optional field'
    REQUIRED_PARAM = 'required parameter'
    OPTIONAL_PARAM = 'optional parameter'

    @classmethod
    def for_field(cls, field: ObjectField, body_required: bool) -> 'Property':
        # Object fields are only required if the object itself is required.
        if body_required and field.required:
            return cls.REQUIRED_FIELD
        return cls.OPTIONAL_FIELD

    @classmethod
    def for_parameter(cls, param: Parameter) -> 'Property':
        return cls.REQUIRED_PARAM if param.required else cls.OPTIONAL_PARAM

    @property
    def is_required(self) -> bool:
        return self in (Property.REQUIRED_FIELD, Property.REQUIRED_PARAM)

    @property
    def is_parameter(self) -> bool:
        return self in (Property.REQUIRED_PARAM, Property.OPTIONAL_PARAM)

    @property
    def is_field(self) -> bool:
        return self in (Property.REQUIRED_FIELD, Property.OPTIONAL_FIELD)


@dataclasses.dataclass(frozen=True)
class Attribute:
    """A uniquely named slot of a builder."""

    name: str
    ty_path: str
    property: Property

    @classmethod
    def from_parameter(cls, param: Parameter) -> 'Attribute':
        return cls(param.name, param.ty_path, Property.for_parameter(param))

    @classmethod
    def from_field(cls, field: ObjectField, body_required: bool) -> 'Attribute':
        return cls(field.name, field.ty_path, Property.for_field(field, body_required))


def _report_collision(
    builder: 'ApiObjectBuilder', kept: Attribute, dropped: Attribute
) -> None:
    name = struct_name(builder)
    if builder.on_collision == 'error':
        raise AttributeCollisionError(
            name, kept.name, kept.property.value, dropped.property.value
        )

    message = (
        f"{name}: '{dropped.name}' ({dropped.property.value}) is shadowed by "
        f'a {kept.property.value} of the same name'
    )
    if builder.on_collision == 'warn':
        logger.warning(message)
    else:
        logger.debug(message)


def slot_key(name: str) -> str:
    """Identity of a slot: names that render to the same type parameter collide."""
    return to_snake_case(name)


def _merge_parameters(builder: 'ApiObjectBuilder') -> Iterator[Attribute]:
    merged: dict[str, Attribute] = {}
    from_path: set[str] = set()

    for param in builder.path_params:
        attr = Attribute.from_parameter(param)
        key = slot_key(attr.name)
        if key in merged:
            _report_collision(builder, merged[key], attr)
            continue
        merged[key] = attr
        from_path.add(key)

    for param in builder.op_params:
        attr = Attribute.from_parameter(param)
        key = slot_key(attr.name)
        if key not in merged:
            merged[key] = attr
        elif builder.param_precedence == 'operation' and key in from_path:
            # Replaced in place, the slot keeps the path parameter's position.
            _report_collision(builder, attr, merged[key])
            merged[key] = attr
            from_path.discard(key)
        else:
            _report_collision(builder, merged[key], attr)

    return iter(merged.values())


def _dedupe(
    builder: 'ApiObjectBuilder', attributes: Iterable[Attribute]
) -> Iterator[Attribute]:
    seen: dict[str, Attribute] = {}
    for attr in attributes:
        key = slot_key(attr.name)
        if key in seen:
            _report_collision(builder, seen[key], attr)
            continue
        seen[key] = attr
        yield attr


def merge_attributes(builder: 'ApiObjectBuilder') -> tuple[Attribute, ...]:
    """Return the unique, ordered attributes exposed by a builder.

    Parameters come first (path-level, then operation-level), followed by the
    object's fields. Names are compared by their snake_case form, so ``petId``
    and ``pet_id`` are the same slot. The first occurrence of a name wins, so a parameter always
    shadows a field of the same name. With ``param_precedence='operation'`` an
    operation-level parameter replaces a path-level one of the same name.

    Args:
        builder: The builder descriptor to merge attributes for.

    Returns:
        Tuple of attributes with unique names, in merge order.

    Raises:
        AttributeCollisionError: If a name collides and the builder was
            derived with ``on_collision='error'``.
    """
    fields = (
        Attribute.from_field(field, builder.body_required) for field in builder.fields
    )
    return tuple(_dedupe(builder, chain(_merge_parameters(builder), fields)))


def required_attributes(builder: 'ApiObjectBuilder') -> tuple[Attribute, ...]:
    """Attributes that get a typestate slot, in merge order."""
    return tuple(a for a in merge_attributes(builder) if a.property.is_required)


def needs_container(builder: 'ApiObjectBuilder') -> bool:
    """Return whether the builder's state lives in a separate container.

    A container is needed as soon as the builder has a required slot: the
    builder struct is then ``#[repr(transparent)]`` over the container so it
    can be transmuted between typestates.
    """
    return any(p.required for p in chain(builder.op_params, builder.path_params)) or (
        builder.body_required and builder.object.has_required_fields
    )


def has_fields(builder: 'ApiObjectBuilder') -> bool:
    """Return whether the builder has at least one parameter or required slot."""
    return any(
        a.property.is_parameter or a.property.is_required
        for a in merge_attributes(builder)
    )
