"""Code generation module for crabgen.

This module turns resolved API objects into Rust source text: the record
structs, one typestate builder per bound operation, and the impl blocks
holding the builder constructors.

Main Components:
    - ApiObject and friends: the immutable input model
    - derive_builders: expands an object into builder descriptors
    - merge_attributes / needs_container: per-builder attribute logic
    - naming: struct, constructor and slot names
    - renderer: writes Rust text to a sink
    - Codegen: loads a records document, renders and emits it

Example:
    >>> from crabgen.codegen import ApiObject, ObjectField, render_object
    >>> pet = ApiObject('Pet', fields=[ObjectField('id', 'i64', required=True)])
    >>> print(render_object(pet))
"""

from crabgen.codegen.builders import (
    ApiObjectBuilder,
    ApiObjectImpl,
    Attribute,
    BuilderSource,
    Property,
    derive_builders,
    merge_attributes,
    needs_container,
)
from crabgen.codegen.codegen import Codegen, render_object_blocks
from crabgen.codegen.emitter import CodeEmitter, FileEmitter, StringEmitter
from crabgen.codegen.models import (
    ApiObject,
    HttpMethod,
    ObjectField,
    OpRequirement,
    Parameter,
    PathOps,
)
from crabgen.codegen.naming import constructor_name, struct_name
from crabgen.codegen.renderer import (
    render_builder,
    render_container,
    render_impl,
    render_object,
    write_builder,
    write_container,
    write_impl,
    write_object,
)
from crabgen.codegen.schema_loader import RecordsLoader, load_objects

__all__ = [
    # Model
    'ApiObject',
    'HttpMethod',
    'ObjectField',
    'OpRequirement',
    'Parameter',
    'PathOps',
    # Builders
    'ApiObjectBuilder',
    'ApiObjectImpl',
    'Attribute',
    'BuilderSource',
    'Property',
    'derive_builders',
    'merge_attributes',
    'needs_container',
    # Naming
    'constructor_name',
    'struct_name',
    # Rendering
    'render_builder',
    'render_container',
    'render_impl',
    'render_object',
    'write_builder',
    'write_container',
    'write_impl',
    'write_object',
    # Loading and emission
    'Codegen',
    'CodeEmitter',
    'FileEmitter',
    'StringEmitter',
    'RecordsLoader',
    'load_objects',
    'render_object_blocks',
]
