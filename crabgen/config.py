import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from crabgen.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['crabgen.yaml', 'crabgen.yml']

DEFAULT_RECORD_DERIVES = ['Debug', 'Default', 'Clone', 'Deserialize', 'Serialize']


class GeneratorConfig(BaseModel):
    """Options controlling how records and builders are emitted."""

    helper_module_prefix: str = Field(
        'crate::generics::',
        description='Path prefix of the module holding the typestate marker types.',
    )

    param_precedence: Literal['path', 'operation'] = Field(
        'path',
        description=(
            'Which parameter wins when a path-level and an operation-level '
            'parameter share a name.'
        ),
    )

    on_collision: Literal['ignore', 'warn', 'error'] = Field(
        'ignore',
        description='What to do when a builder attribute is declared twice.',
    )

    record_derives: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RECORD_DERIVES),
        description='Derive list emitted on record structs.',
    )


class DocumentConfig(BaseModel):
    """Represents a single records document to be processed."""

    source: str = Field(..., description='Path to the records document.')

    output: str = Field(..., description='Output directory for the generated code.')

    module_file: str = Field(
        'objects.rs', description='File name for the generated Rust module.'
    )


class CodegenConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='CRABGEN_', env_nested_delimiter='__')

    documents: list[DocumentConfig] = Field(
        ..., description='List of records documents to process.'
    )

    generator: GeneratorConfig = Field(
        default_factory=GeneratorConfig,
        description='Emission options shared by every document.',
    )


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader)


def _validate(data: dict, source: str | Path) -> CodegenConfig:
    try:
        return CodegenConfig.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = '.'.join(str(part) for part in first['loc']) or None
        raise ConfigurationError(
            first['msg'], config_path=str(source), field=field
        ) from e


def get_config(path: str | None = None) -> CodegenConfig:
    """Load configuration from a file or the working directory.

    Raises:
        FileNotFoundError: If no configuration can be found.
        ConfigurationError: If the configuration does not validate.
    """
    if path:
        return _validate(load_yaml(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return _validate(load_yaml(path), path)

    path = Path(os.getcwd()) / 'pyproject.toml'

    if path.exists():
        import tomllib

        pyproject = tomllib.loads(path.read_text())
        tools = pyproject.get('tool', {})

        if 'crabgen' in tools:
            return _validate(tools['crabgen'], path)

    raise FileNotFoundError('config not found')
