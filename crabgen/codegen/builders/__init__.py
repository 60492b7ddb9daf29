"""Builder descriptors and the attribute logic behind them."""

from crabgen.codegen.builders.attributes import (
    Attribute,
    Property,
    has_fields,
    merge_attributes,
    needs_container,
    required_attributes,
)
from crabgen.codegen.builders.deriver import (
    ApiObjectBuilder,
    ApiObjectImpl,
    BuilderSource,
    builder_source,
    derive_builders,
)

__all__ = [
    'ApiObjectBuilder',
    'ApiObjectImpl',
    'Attribute',
    'BuilderSource',
    'Property',
    'builder_source',
    'derive_builders',
    'has_fields',
    'merge_attributes',
    'needs_container',
    'required_attributes',
]
