"""Loading of records documents.

A records document is a YAML or JSON file describing the resolved API
objects to generate, the paths and operations bound to them and the
parameters those operations need:

    objects:
      - name: Pet
        fields:
          - {name: id, type: i64, required: true}
          - {name: pet_name, rename: petName, type: String}
        paths:
          /pets:
            operations:
              post: {operation_id: addPet, body_required: true}

The loader validates the document with pydantic and converts it into the
immutable model from :mod:`crabgen.codegen.models`.
"""

import json
import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from upath import UPath

from crabgen.codegen.models import (
    ApiObject,
    HttpMethod,
    ObjectField,
    OpRequirement,
    Parameter,
    PathOps,
)
from crabgen.exceptions import SchemaLoadError, SchemaValidationError

__all__ = ['RecordsDocument', 'RecordsLoader', 'load_objects']

logger = logging.getLogger(__name__)


class _Spec(BaseModel):
    model_config = ConfigDict(extra='forbid', populate_by_name=True)


class ParameterSpec(_Spec):
    name: str
    ty_path: str = Field(..., alias='type')
    required: bool = False

    def to_model(self) -> Parameter:
        return Parameter(name=self.name, ty_path=self.ty_path, required=self.required)


class FieldSpec(_Spec):
    name: str
    ty_path: str = Field(..., alias='type')
    required: bool = False
    rename: str | None = None
    boxed: bool = False

    def to_model(self) -> ObjectField:
        return ObjectField(
            name=self.name,
            ty_path=self.ty_path,
            required=self.required,
            rename=self.rename,
            boxed=self.boxed,
        )


class OperationSpec(_Spec):
    operation_id: str | None = Field(None, alias='operationId')
    body_required: bool = False
    params: list[ParameterSpec] = Field(default_factory=list)

    def to_model(self) -> OpRequirement:
        return OpRequirement(
            operation_id=self.operation_id,
            params=tuple(p.to_model() for p in self.params),
            body_required=self.body_required,
        )


class PathSpec(_Spec):
    params: list[ParameterSpec] = Field(default_factory=list)
    operations: dict[str, OperationSpec] = Field(default_factory=dict)

    @field_validator('operations')
    @classmethod
    def _check_methods(cls, value: dict[str, OperationSpec]) -> dict[str, OperationSpec]:
        methods = [HttpMethod(key) for key in value]
        if len(set(methods)) != len(methods):
            raise ValueError('an HTTP method is bound more than once on this path')
        return value

    def to_model(self) -> PathOps:
        return PathOps(
            operations={HttpMethod(m): op.to_model() for m, op in self.operations.items()},
            params=tuple(p.to_model() for p in self.params),
        )


class ObjectSpec(_Spec):
    name: str
    fields: list[FieldSpec] = Field(default_factory=list)
    paths: dict[str, PathSpec] = Field(default_factory=dict)

    def to_model(self) -> ApiObject:
        return ApiObject(
            name=self.name,
            fields=tuple(f.to_model() for f in self.fields),
            paths={path: spec.to_model() for path, spec in self.paths.items()},
        )


class RecordsDocument(_Spec):
    objects: list[ObjectSpec] = Field(default_factory=list)

    def to_models(self) -> list[ApiObject]:
        return [spec.to_model() for spec in self.objects]


class RecordsLoader:
    """Loads records documents from local YAML or JSON files.

    Example:
        >>> loader = RecordsLoader()
        >>> objects = loader.load('./records.yaml')
    """

    def __init__(self, base_path: str | Path | None = None):
        self._base_path = UPath(base_path) if base_path else UPath(Path.cwd())

    def load(self, source: str) -> list[ApiObject]:
        """Load, validate and convert a records document.

        Raises:
            SchemaLoadError: If the file cannot be read or parsed.
            SchemaValidationError: If the content is not a valid records document.
        """
        content = self._load_from_file(source)
        objects = self.validate(content, source)
        logger.debug(f'Loaded {len(objects)} objects from {source}')
        return objects

    def validate(self, content: object, source: str = '<memory>') -> list[ApiObject]:
        try:
            document = RecordsDocument.model_validate(content)
        except ValidationError as e:
            errors = [
                f'{".".join(str(p) for p in err["loc"])}: {err["msg"]}'
                for err in e.errors()
            ]
            raise SchemaValidationError(source, errors=errors)

        for spec in document.objects:
            if not spec.fields:
                logger.warning(f"Object '{spec.name}' has no fields")

        return document.to_models()

    def _load_from_file(self, file_path: str) -> object:
        path = UPath(file_path)
        if not path.is_absolute():
            path = self._base_path / file_path

        if not path.exists():
            raise SchemaLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() in ('.yaml', '.yml'):
                return yaml.safe_load(content)
            return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(str(file_path), cause=e)
        except OSError as e:
            raise SchemaLoadError(str(file_path), cause=e)


def load_objects(source: str) -> list[ApiObject]:
    """Convenience wrapper around :meth:`RecordsLoader.load`."""
    return RecordsLoader().load(source)
