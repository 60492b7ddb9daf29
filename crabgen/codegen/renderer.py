"""Rendering of API objects, builders and impls as Rust source text.

Every ``write_*`` function writes to a text sink (anything with a
``write(str)`` method, e.g. an open file or ``io.StringIO``) and lets errors
from the sink propagate. The ``render_*`` variants return the text instead.
Output only depends on the input, so rendering twice gives identical text.
"""

import io
from collections.abc import Callable, Sequence
from typing import Protocol

from crabgen.codegen.builders.attributes import (
    has_fields,
    merge_attributes,
    needs_container,
    required_attributes,
)
from crabgen.codegen.builders.deriver import ApiObjectBuilder, ApiObjectImpl
from crabgen.codegen.models import ApiObject, ObjectField
from crabgen.codegen.naming import (
    constructor_name,
    container_name,
    marker_field_name,
    missing_marker,
    param_field_name,
    struct_name,
    type_param_name,
)

__all__ = [
    'TextSink',
    'DEFAULT_DERIVES',
    'write_object',
    'write_builder',
    'write_container',
    'write_impl',
    'render_object',
    'render_builder',
    'render_container',
    'render_impl',
]

DEFAULT_DERIVES = ('Debug', 'Default', 'Clone', 'Deserialize', 'Serialize')

PHANTOM = 'core::marker::PhantomData'


class TextSink(Protocol):
    def write(self, s: str, /) -> int | None: ...


def _field_type(field: ObjectField) -> str:
    ty = field.ty_path
    if field.boxed:
        ty = f'Box<{ty}>'
    if not field.required:
        ty = f'Option<{ty}>'
    return ty


def write_object(
    obj: ApiObject, f: TextSink, derives: Sequence[str] = DEFAULT_DERIVES
) -> None:
    """Write the record struct of an object.

    Fields keep their declaration order. Optional fields are wrapped in
    ``Option``, boxed fields in ``Box`` (inside the ``Option``), and a serde
    rename attribute precedes fields whose wire name differs.
    """
    f.write(f'#[derive({", ".join(derives)})]')
    f.write(f'\npub struct {obj.name} {{')

    for field in obj.fields:
        f.write('\n    ')
        if field.wire_name != field.name:
            f.write(f'#[serde(rename = "{field.wire_name}")]\n    ')
        f.write(f'pub {field.name}: {_field_type(field)},')

    if obj.fields:
        f.write('\n')

    f.write('}\n')


def _write_generics(builder: ApiObjectBuilder, f: TextSink, missing: bool) -> None:
    required = required_attributes(builder)
    if not required:
        return

    if missing:
        names = [missing_marker(builder, a.name) for a in required]
    else:
        names = [type_param_name(a.name) for a in required]
    f.write(f'<{", ".join(names)}>')


def write_builder(
    builder: ApiObjectBuilder, f: TextSink, include_container: bool = True
) -> None:
    """Write the builder struct of a builder descriptor.

    When the builder has required slots, its state moves into a container
    struct and the builder becomes ``#[repr(transparent)]`` over it, holding
    only ``PhantomData`` markers besides. Builders without any state are
    written as unit structs.

    Args:
        builder: The builder descriptor to write.
        f: Text sink to write to.
        include_container: Whether to also write the container struct (if
            the builder needs one) right after the builder.
    """
    containerized = needs_container(builder)
    open_body = has_fields(builder) or builder.body_required or containerized

    if containerized:
        f.write('#[repr(transparent)]\n')

    f.write(f'#[derive(Debug, Clone)]\npub struct {struct_name(builder)}')
    _write_generics(builder, f, missing=False)

    if not open_body:
        f.write(';\n')
    else:
        f.write(' {')
        if containerized:
            f.write(f'\n    inner: {container_name(builder)},')
        elif builder.body_required:
            f.write(f'\n    body: {builder.object.name},')

        for attr in merge_attributes(builder):
            if attr.property.is_parameter and not containerized:
                f.write(f'\n    {param_field_name(attr.name)}: Option<{attr.ty_path}>,')
            if attr.property.is_required:
                marker = marker_field_name(attr.name, attr.property.is_parameter)
                f.write(f'\n    {marker}: {PHANTOM}<{type_param_name(attr.name)}>,')

        f.write('\n}\n')

    if include_container and containerized:
        f.write('\n')
        write_container(builder, f)


def write_container(builder: ApiObjectBuilder, f: TextSink) -> None:
    """Write the container struct holding the body and parameters.

    Writes nothing for builders that don't need a container.
    """
    if not needs_container(builder):
        return

    f.write(f'#[derive(Debug, Default, Clone)]\nstruct {container_name(builder)} {{')
    if builder.body_required:
        f.write(f'\n    body: {builder.object.name},')

    for attr in merge_attributes(builder):
        if attr.property.is_parameter:
            f.write(f'\n    {param_field_name(attr.name)}: Option<{attr.ty_path}>,')

    f.write('\n}\n')


def _write_constructor(builder: ApiObjectBuilder, count: int, f: TextSink) -> None:
    name = struct_name(builder)
    containerized = needs_container(builder)

    f.write(f'\n    #[inline]\n    pub fn {constructor_name(builder, count)}() -> {name}')
    _write_generics(builder, f, missing=True)
    f.write(f' {{\n        {name} {{')

    if containerized:
        f.write('\n            inner: Default::default(),')
    elif builder.body_required:
        f.write('\n            body: Default::default(),')

    for attr in merge_attributes(builder):
        if attr.property.is_required:
            marker = marker_field_name(attr.name, attr.property.is_parameter)
            f.write(f'\n            {marker}: {PHANTOM},')
        elif attr.property.is_parameter and not containerized:
            f.write(f'\n            {param_field_name(attr.name)}: None,')

    f.write('\n        }\n    }')


def write_impl(impl: ApiObjectImpl, f: TextSink) -> None:
    """Write the ``impl`` block with one constructor per builder.

    Each constructor returns its builder with every slot set to its
    ``Missing`` marker. Nothing is written if the object has no builders.
    """
    if not impl.builders:
        return

    count = len(impl.builders)
    f.write(f'impl {impl.object.name} {{')
    for builder in impl.builders:
        _write_constructor(builder, count, f)
    f.write('\n}\n')


def _render(writer: Callable[..., None], *args, **kwargs) -> str:
    buffer = io.StringIO()
    writer(*args, buffer, **kwargs)
    return buffer.getvalue()


def render_object(obj: ApiObject, derives: Sequence[str] = DEFAULT_DERIVES) -> str:
    return _render(write_object, obj, derives=derives)


def render_builder(builder: ApiObjectBuilder, include_container: bool = True) -> str:
    return _render(write_builder, builder, include_container=include_container)


def render_container(builder: ApiObjectBuilder) -> str:
    return _render(write_container, builder)


def render_impl(impl: ApiObjectImpl) -> str:
    return _render(write_impl, impl)
