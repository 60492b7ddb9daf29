"""Simplified API objects for code generation.

These are the resolved records that the emitter turns into Rust structs,
their builders and impls. Instances are immutable; every downstream stage
(builders, naming, rendering) only reads them.
"""

import dataclasses
from collections.abc import Iterator, Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crabgen.codegen.builders.deriver import ApiObjectBuilder, ApiObjectImpl

__all__ = [
    'HttpMethod',
    'Parameter',
    'ObjectField',
    'OpRequirement',
    'PathOps',
    'ApiObject',
]


class HttpMethod(Enum):
    """HTTP methods an object can be bound to.

    Declaration order is the canonical order used when iterating the
    operations of a path.
    """

    GET = 'get'
    PUT = 'put'
    POST = 'post'
    DELETE = 'delete'
    OPTIONS = 'options'
    HEAD = 'head'
    PATCH = 'patch'

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @property
    def display_name(self) -> str:
        """Stable display form used in type names (``Get``, ``Post``)."""
        return self.value.capitalize()

    @property
    def rank(self) -> int:
        return _METHOD_RANKS[self]

    def __str__(self) -> str:
        return self.display_name


_METHOD_RANKS = {method: rank for rank, method in enumerate(HttpMethod)}


def _freeze(items: Sequence) -> tuple:
    return tuple(items)


@dataclasses.dataclass(frozen=True)
class Parameter:
    """A header, path, query or form parameter of an operation."""

    name: str
    ty_path: str
    required: bool = False


@dataclasses.dataclass(frozen=True)
class ObjectField:
    """A field of an API object.

    ``rename`` holds the wire name when it differs from ``name``. ``boxed``
    fields are stored behind a ``Box`` so that recursive or oversized types
    can be embedded.
    """

    name: str
    ty_path: str
    required: bool = False
    rename: str | None = None
    boxed: bool = False

    @property
    def wire_name(self) -> str:
        return self.rename if self.rename is not None else self.name


@dataclasses.dataclass(frozen=True)
class OpRequirement:
    """What an operation needs from the object it is bound to."""

    operation_id: str | None = None
    params: tuple[Parameter, ...] = ()
    body_required: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'params', _freeze(self.params))


@dataclasses.dataclass(frozen=True)
class PathOps:
    """Operations bound on one path, plus the parameters they all share."""

    operations: Mapping[HttpMethod, OpRequirement] = dataclasses.field(
        default_factory=dict, hash=False
    )
    params: tuple[Parameter, ...] = ()

    def __post_init__(self):
        operations = {HttpMethod(m): req for m, req in self.operations.items()}
        object.__setattr__(self, 'operations', MappingProxyType(operations))
        object.__setattr__(self, 'params', _freeze(self.params))

    def sorted_operations(self) -> Iterator[tuple[HttpMethod, OpRequirement]]:
        """Yield ``(method, requirement)`` pairs in canonical method order."""
        yield from sorted(self.operations.items(), key=lambda item: item[0].rank)


@dataclasses.dataclass(frozen=True)
class ApiObject:
    """A record to be generated, together with the paths that address it."""

    name: str
    fields: tuple[ObjectField, ...] = ()
    paths: Mapping[str, PathOps] = dataclasses.field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'fields', _freeze(self.fields))
        object.__setattr__(self, 'paths', MappingProxyType(dict(self.paths)))

    @property
    def has_required_fields(self) -> bool:
        return any(f.required for f in self.fields)

    def sorted_paths(self) -> list[tuple[str, PathOps]]:
        """Bound paths in sorted order, so ranks don't depend on input order."""
        return sorted(self.paths.items(), key=lambda item: item[0])

    def builders(
        self, helper_module_prefix: str = '', **options
    ) -> Iterator['ApiObjectBuilder']:
        """Return the builder descriptors of this object.

        Each builder is bound to an operation on a path. An object that is
        not bound to any operation gets a single standalone builder.
        """
        from crabgen.codegen.builders.deriver import derive_builders

        return derive_builders(self, helper_module_prefix, **options)

    def impl_repr(self, helper_module_prefix: str = '', **options) -> 'ApiObjectImpl':
        """Return the impl (constructor methods) representation of this object."""
        from crabgen.codegen.builders.deriver import ApiObjectImpl

        return ApiObjectImpl(self, tuple(self.builders(helper_module_prefix, **options)))
