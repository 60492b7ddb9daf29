"""Names of generated builder structs, constructors and typestate slots.

Every function here is a pure query over a builder descriptor. The setter
and finalizer emitters address the same slots, so these names must stay
stable for a given input.
"""

from typing import TYPE_CHECKING

from crabgen.codegen.utils import to_camel_case, to_snake_case

if TYPE_CHECKING:
    from crabgen.codegen.builders.deriver import ApiObjectBuilder

__all__ = [
    'GENERIC_CONSTRUCTOR',
    'struct_name',
    'container_name',
    'constructor_name',
    'type_param_name',
    'missing_marker',
    'marker_field_name',
    'param_field_name',
]

GENERIC_CONSTRUCTOR = 'builder'


def struct_name(builder: 'ApiObjectBuilder') -> str:
    """``<Object><Method?>Builder<Ordinal?>``, e.g. ``PetPostBuilder1``."""
    name = builder.object.name
    if builder.method is not None:
        name += builder.method.display_name
    name += 'Builder'
    if builder.ordinal > 0:
        name += str(builder.ordinal)
    return name


def container_name(builder: 'ApiObjectBuilder') -> str:
    return struct_name(builder) + 'Container'


def constructor_name(builder: 'ApiObjectBuilder', builder_count: int) -> str:
    """Resolve the name of the constructor method for a builder.

    Args:
        builder: The builder descriptor.
        builder_count: Number of builders derived from the same object.

    Returns:
        The snake-cased method name, in order of preference: the HTTP method
        when the object has a single builder, the operation ID, the HTTP
        method suffixed with the path ordinal, or ``builder`` for objects
        that aren't bound to any operation.
    """
    if builder.method is not None and builder_count == 1:
        return to_snake_case(builder.method.value)

    if builder.operation_id is not None:
        return to_snake_case(builder.operation_id)

    if builder.method is not None:
        name = to_snake_case(builder.method.value)
        if builder.ordinal > 0:
            name += f'_{builder.ordinal}'
        return name

    return GENERIC_CONSTRUCTOR


def type_param_name(attribute_name: str) -> str:
    return to_camel_case(attribute_name)


def missing_marker(builder: 'ApiObjectBuilder', attribute_name: str) -> str:
    """Fully qualified marker type of a slot that hasn't been set yet."""
    return f'{builder.helper_module_prefix}Missing{type_param_name(attribute_name)}'


def marker_field_name(attribute_name: str, is_parameter: bool) -> str:
    prefix = '_param_' if is_parameter else '_'
    return prefix + to_snake_case(attribute_name)


def param_field_name(attribute_name: str) -> str:
    return 'param_' + to_snake_case(attribute_name)
