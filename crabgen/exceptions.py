"""Custom exceptions for crabgen.

This module defines the exception hierarchy used throughout crabgen to
report loading, configuration, generation and output failures.
"""


class CrabgenError(Exception):
    """Base exception for all crabgen errors.

    Example:
        try:
            codegen.generate()
        except CrabgenError as e:
            print(f"crabgen error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SchemaError(CrabgenError):
    """Base exception for records-document errors."""

    pass


class SchemaLoadError(SchemaError):
    """Failed to read or parse a records document.

    Attributes:
        source: The path that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load records from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class SchemaValidationError(SchemaError):
    """Records document does not have the expected shape.

    Attributes:
        source: The path of the invalid document.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Records validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class CodeGenerationError(CrabgenError):
    """Error during code generation.

    Attributes:
        context: Additional context about what was being generated.
        cause: The underlying exception that caused the failure.
    """

    def __init__(
        self, message: str, context: str | None = None, cause: Exception | None = None
    ):
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f'{message} (while generating {context})'
        if cause:
            full_message += f': {cause}'
        super().__init__(full_message)


class AttributeCollisionError(CodeGenerationError):
    """Two attributes of one builder share a name.

    Only raised when the generator runs with ``on_collision='error'``.

    Attributes:
        builder: Name of the builder struct being merged.
        attribute: The colliding attribute name.
        kept: Property of the attribute that was kept.
        dropped: Property of the attribute that would have been dropped.
    """

    def __init__(self, builder: str, attribute: str, kept: str, dropped: str):
        self.builder = builder
        self.attribute = attribute
        self.kept = kept
        self.dropped = dropped
        message = f"Attribute '{attribute}' is declared more than once ({kept} vs {dropped})"
        super().__init__(message, context=builder)


class ConfigurationError(CrabgenError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(CrabgenError):
    """Error writing generated output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
