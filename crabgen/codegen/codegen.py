"""Orchestration of a generation pass: load records, render, emit."""

import logging
from collections.abc import Iterable

from crabgen.codegen.emitter import CodeEmitter, FileEmitter
from crabgen.codegen.models import ApiObject
from crabgen.codegen.renderer import render_builder, render_impl, render_object
from crabgen.codegen.schema_loader import RecordsLoader
from crabgen.config import DocumentConfig, GeneratorConfig

__all__ = ['Codegen', 'render_object_blocks']

logger = logging.getLogger(__name__)


def render_object_blocks(obj: ApiObject, config: GeneratorConfig) -> list[str]:
    """Render every block generated for one object.

    The blocks are the record struct, the impl block with the builder
    constructors, and one block per builder (with its container, if any).
    """
    impl = obj.impl_repr(
        config.helper_module_prefix,
        param_precedence=config.param_precedence,
        on_collision=config.on_collision,
    )
    blocks = [render_object(obj, derives=config.record_derives), render_impl(impl)]
    blocks.extend(render_builder(builder) for builder in impl.builders)
    logger.debug(f'{obj.name}: rendered {len(impl.builders)} builders')
    return [block for block in blocks if block]


class Codegen:
    """Generates a Rust module from a records document.

    Example:
        >>> config = DocumentConfig(source='./records.yaml', output='./src')
        >>> Codegen(config).generate()
    """

    def __init__(
        self,
        config: DocumentConfig,
        generator_config: GeneratorConfig | None = None,
        emitter: CodeEmitter | None = None,
        loader: RecordsLoader | None = None,
    ):
        self.config = config
        self.generator_config = generator_config or GeneratorConfig()
        self.emitter = emitter or FileEmitter(config.output)
        self.loader = loader or RecordsLoader()

    def render(self, objects: Iterable[ApiObject]) -> list[str]:
        blocks: list[str] = []
        for obj in objects:
            blocks.extend(render_object_blocks(obj, self.generator_config))
        return blocks

    def generate(self) -> str:
        """Run the generation pass.

        Returns:
            Whatever the emitter returns, the written path for a FileEmitter.
        """
        objects = self.loader.load(self.config.source)
        logger.info(f'Generating {len(objects)} objects from {self.config.source}')
        return self.emitter.emit_module(self.render(objects), self.config.module_file)
