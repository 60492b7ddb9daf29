"""Derivation of builder descriptors from API objects."""

import dataclasses
import logging
from collections.abc import Iterator
from enum import Enum
from typing import Literal

from crabgen.codegen.models import ApiObject, HttpMethod, ObjectField, Parameter

__all__ = [
    'BuilderSource',
    'ApiObjectBuilder',
    'ApiObjectImpl',
    'builder_source',
    'derive_builders',
]

logger = logging.getLogger(__name__)


class BuilderSource(Enum):
    """Where the builders of an object come from."""

    STANDALONE = 'standalone'
    PER_OPERATION = 'per_operation'


@dataclasses.dataclass(frozen=True)
class ApiObjectBuilder:
    """Descriptor of one builder struct for an API object.

    The descriptor references its object and never copies its fields, so it
    must not be used after the object graph is discarded.

    Attributes:
        object: The object this builder produces.
        ordinal: Zero-based rank of the bound path among the object's paths.
            Only used to disambiguate names.
        helper_module_prefix: Path prefix of the typestate marker types.
        method: HTTP method of the bound operation, if any.
        operation_id: Operation ID of the bound operation, if any.
        path: The bound path, if any.
        body_required: Whether the object itself is sent with the operation.
        path_params: Parameters shared by all operations on the path.
        op_params: Parameters specific to the operation.
    """

    object: ApiObject = dataclasses.field(repr=False)
    ordinal: int = 0
    helper_module_prefix: str = ''
    method: HttpMethod | None = None
    operation_id: str | None = None
    path: str | None = None
    body_required: bool = True
    path_params: tuple[Parameter, ...] = ()
    op_params: tuple[Parameter, ...] = ()
    param_precedence: Literal['path', 'operation'] = 'path'
    on_collision: Literal['ignore', 'warn', 'error'] = 'ignore'

    @property
    def fields(self) -> tuple[ObjectField, ...]:
        return self.object.fields


@dataclasses.dataclass(frozen=True)
class ApiObjectImpl:
    """The ``impl`` block of an object: one constructor per builder."""

    object: ApiObject
    builders: tuple[ApiObjectBuilder, ...] = ()

    @property
    def has_multiple(self) -> bool:
        return len(self.builders) > 1


def builder_source(obj: ApiObject) -> BuilderSource:
    return BuilderSource.PER_OPERATION if obj.paths else BuilderSource.STANDALONE


def derive_builders(
    obj: ApiObject,
    helper_module_prefix: str = '',
    *,
    param_precedence: Literal['path', 'operation'] = 'path',
    on_collision: Literal['ignore', 'warn', 'error'] = 'ignore',
) -> Iterator[ApiObjectBuilder]:
    """Yield the builder descriptors of an object.

    An object that isn't bound to any path yields exactly one standalone
    builder which always requires the body. Otherwise one builder is yielded
    per (path, method) pair, paths in sorted order and methods in canonical
    order.

    Args:
        obj: The object to derive builders for.
        helper_module_prefix: Path prefix of the typestate marker types.
        param_precedence: Which parameter wins when a path-level and an
            operation-level parameter share a name.
        on_collision: What to do when an attribute name is declared twice.

    Yields:
        ApiObjectBuilder descriptors referencing ``obj``.
    """
    options = {
        'helper_module_prefix': helper_module_prefix,
        'param_precedence': param_precedence,
        'on_collision': on_collision,
    }

    if builder_source(obj) is BuilderSource.STANDALONE:
        logger.debug(f'{obj.name}: no bound operations, using a standalone builder')
        yield ApiObjectBuilder(object=obj, body_required=True, **options)
        return

    for ordinal, (path, path_ops) in enumerate(obj.sorted_paths()):
        for method, req in path_ops.sorted_operations():
            logger.debug(f'{obj.name}: builder for {method.name} {path}')
            yield ApiObjectBuilder(
                object=obj,
                ordinal=ordinal,
                method=method,
                operation_id=req.operation_id,
                path=path,
                body_required=req.body_required,
                path_params=path_ops.params,
                op_params=req.params,
                **options,
            )
