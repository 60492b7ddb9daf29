"""End-to-end tests for the generation pass and the emitters."""

import json

import pytest

from crabgen.codegen.codegen import Codegen, render_object_blocks
from crabgen.codegen.emitter import MODULE_HEADER, FileEmitter, StringEmitter, build_module
from crabgen.config import DocumentConfig, GeneratorConfig
from crabgen.exceptions import AttributeCollisionError, OutputError

from .fixtures import PETSTORE_RECORDS, pet_post, standalone_pet


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / 'records.json'
    path.write_text(json.dumps(PETSTORE_RECORDS))
    return path


class TestRenderObjectBlocks:
    """Tests for render_object_blocks."""

    def test_block_order(self):
        blocks = render_object_blocks(pet_post(), GeneratorConfig())
        assert len(blocks) == 3
        assert blocks[0].startswith('#[derive(Debug, Default, Clone, Deserialize, Serialize)]')
        assert blocks[1].startswith('impl Pet {')
        assert blocks[2].startswith('#[repr(transparent)]')

    def test_uses_helper_prefix(self):
        config = GeneratorConfig(helper_module_prefix='crate::markers::')
        blocks = render_object_blocks(standalone_pet(), config)
        assert 'PetBuilder<crate::markers::MissingId>' in blocks[1]

    def test_uses_record_derives(self):
        config = GeneratorConfig(record_derives=['Debug', 'Serialize'])
        blocks = render_object_blocks(standalone_pet(), config)
        assert blocks[0].startswith('#[derive(Debug, Serialize)]')

    def test_collision_policy_is_applied(self):
        from crabgen.codegen.models import ApiObject, ObjectField, OpRequirement, Parameter, PathOps

        obj = ApiObject(
            'Pet',
            fields=[ObjectField('id', 'i64', required=True)],
            paths={
                '/pets/{id}': PathOps(
                    operations={'get': OpRequirement()},
                    params=[Parameter('id', 'i64', required=True)],
                )
            },
        )
        with pytest.raises(AttributeCollisionError):
            render_object_blocks(obj, GeneratorConfig(on_collision='error'))


class TestCodegen:
    """Tests for the Codegen orchestrator."""

    def test_generate_to_string(self, records_file, tmp_path):
        emitter = StringEmitter()
        config = DocumentConfig(source=str(records_file), output=str(tmp_path / 'out'))

        source = Codegen(config, emitter=emitter).generate()

        assert source == emitter.get_module('objects.rs')
        assert source.startswith(MODULE_HEADER)
        assert 'pub struct Pet {' in source
        assert 'pub struct Category {' in source
        assert '    pub fn list_pets() -> PetGetBuilder {' in source
        assert '    pub fn add_pet() -> PetPostBuilder<crate::generics::MissingId> {' in source
        assert '    pub fn get_pet() -> PetGetBuilder1<crate::generics::MissingPetId> {' in source
        assert '    pub fn builder() -> CategoryBuilder<crate::generics::MissingTitle> {' in source
        assert '#[serde(rename = "parentPet")]\n    pub parent: Option<Box<Pet>>,' in source
        assert not (tmp_path / 'out').exists()

    def test_generate_to_file(self, records_file, tmp_path):
        out = tmp_path / 'generated'
        config = DocumentConfig(
            source=str(records_file), output=str(out), module_file='models.rs'
        )

        written = Codegen(config).generate()

        assert written == str(out / 'models.rs')
        content = (out / 'models.rs').read_text()
        assert content.startswith('use serde::{Deserialize, Serialize};\n')
        assert 'struct PetPostBuilderContainer {' in content

    def test_generation_is_deterministic(self, records_file, tmp_path):
        config = DocumentConfig(source=str(records_file), output=str(tmp_path))
        first = Codegen(config, emitter=StringEmitter()).generate()
        second = Codegen(config, emitter=StringEmitter()).generate()
        assert first == second


class TestEmitters:
    """Tests for the emitters."""

    def test_build_module(self):
        assert build_module(['a\n', 'b\n']) == MODULE_HEADER + '\na\n\nb\n'
        assert build_module(['a\n'], header=None) == 'a\n'

    def test_file_emitter_appends_extension(self, tmp_path):
        emitter = FileEmitter(tmp_path)
        path = emitter.emit_module(['pub struct A;\n'], 'objects')
        assert path.endswith('objects.rs')
        assert emitter.get_written_files() == [path]

    def test_file_emitter_output_error(self, tmp_path):
        blocker = tmp_path / 'blocker'
        blocker.write_text('not a directory')

        with pytest.raises(OutputError) as exc_info:
            FileEmitter(blocker).emit_module(['pub struct A;\n'], 'objects')
        assert isinstance(exc_info.value.cause, OSError)

    def test_string_emitter_keeps_modules(self):
        emitter = StringEmitter()
        emitter.emit_module(['pub struct A;\n'], 'a')
        emitter.emit_module(['pub struct B;\n'], 'b')
        assert set(emitter.get_all_modules()) == {'a', 'b'}
        assert emitter.get_module('missing') is None
