"""crabgen - Generate Rust API objects with typestate builders.

crabgen is the emission engine of an API-client generator. It turns resolved
API objects (records, the operations bound to them and their parameters)
into Rust structs, per-operation builder structs, and the generic marker
parameters that make forgetting a required attribute a compile error.

Quick Start:
    >>> from crabgen import Codegen, DocumentConfig
    >>>
    >>> config = DocumentConfig(source='./records.yaml', output='./src')
    >>> Codegen(config).generate()

CLI Usage:
    $ crabgen generate --config crabgen.yaml
"""

from crabgen.codegen.codegen import Codegen
from crabgen.codegen.models import (
    ApiObject,
    HttpMethod,
    ObjectField,
    OpRequirement,
    Parameter,
    PathOps,
)
from crabgen.codegen.schema_loader import RecordsLoader
from crabgen.config import CodegenConfig, DocumentConfig, GeneratorConfig, get_config
from crabgen.exceptions import (
    AttributeCollisionError,
    CodeGenerationError,
    ConfigurationError,
    CrabgenError,
    OutputError,
    SchemaError,
    SchemaLoadError,
    SchemaValidationError,
)

__all__ = [
    # Main classes
    'Codegen',
    'RecordsLoader',
    # Model
    'ApiObject',
    'HttpMethod',
    'ObjectField',
    'OpRequirement',
    'Parameter',
    'PathOps',
    # Configuration
    'CodegenConfig',
    'DocumentConfig',
    'GeneratorConfig',
    'get_config',
    # Exceptions
    'CrabgenError',
    'SchemaError',
    'SchemaLoadError',
    'SchemaValidationError',
    'CodeGenerationError',
    'AttributeCollisionError',
    'ConfigurationError',
    'OutputError',
]

__version__ = '0.1.0'
