"""Tests for the crabgen exception hierarchy."""

import pytest

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


class TestCrabgenError:
    """Tests for the base CrabgenError exception."""

    def test_basic_message(self):
        error = CrabgenError('Something went wrong')
        assert error.message == 'Something went wrong'
        assert str(error) == 'Something went wrong'

    def test_can_be_caught_as_exception(self):
        with pytest.raises(Exception):
            raise CrabgenError('Test error')


class TestSchemaErrors:
    """Tests for records-document exceptions."""

    def test_inheritance(self):
        assert isinstance(SchemaLoadError('a.yaml'), SchemaError)
        assert isinstance(SchemaValidationError('a.yaml'), SchemaError)
        assert isinstance(SchemaError('x'), CrabgenError)

    def test_schema_load_error_with_cause(self):
        cause = FileNotFoundError('gone')
        error = SchemaLoadError('records.yaml', cause=cause)
        assert error.source == 'records.yaml'
        assert error.cause is cause
        assert 'records.yaml' in str(error)
        assert 'gone' in str(error)

    def test_schema_validation_error_with_errors(self):
        errors = ['objects.0.name: Field required', 'objects.1: bad']
        error = SchemaValidationError('records.yaml', errors=errors)
        assert error.errors == errors
        assert 'objects.0.name: Field required; objects.1: bad' in str(error)

    def test_schema_validation_error_without_errors(self):
        error = SchemaValidationError('records.yaml')
        assert error.errors == []


class TestCodeGenerationErrors:
    """Tests for code generation exceptions."""

    def test_code_generation_error_with_context_and_cause(self):
        cause = TypeError('bad type')
        error = CodeGenerationError('Generation failed', context='Pet', cause=cause)
        assert error.context == 'Pet'
        assert error.cause is cause
        assert str(error) == 'Generation failed (while generating Pet): bad type'

    def test_attribute_collision_error(self):
        error = AttributeCollisionError(
            'PetGetBuilder', 'id', 'required parameter', 'optional field'
        )
        assert isinstance(error, CodeGenerationError)
        assert error.builder == 'PetGetBuilder'
        assert error.attribute == 'id'
        assert error.context == 'PetGetBuilder'
        assert "'id'" in str(error)
        assert 'PetGetBuilder' in str(error)


class TestOtherErrors:
    def test_configuration_error(self):
        error = ConfigurationError('Invalid value', config_path='crabgen.yaml', field='on_collision')
        assert str(error) == "Invalid value in 'crabgen.yaml' (field: on_collision)"

    def test_output_error(self):
        cause = PermissionError('denied')
        error = OutputError('/out/objects.rs', cause=cause)
        assert error.output_path == '/out/objects.rs'
        assert 'denied' in str(error)
