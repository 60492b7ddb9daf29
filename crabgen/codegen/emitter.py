"""Code emitter interfaces and implementations for generated Rust modules.

Rendered items are joined into a module source and handed to an emitter,
which either writes a `.rs` file or keeps the source in memory.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from upath import UPath

from crabgen.exceptions import OutputError

MODULE_HEADER = 'use serde::{Deserialize, Serialize};\n'


def build_module(blocks: Sequence[str], header: str | None = MODULE_HEADER) -> str:
    """Join rendered blocks into module source, one blank line between blocks."""
    parts = [header] if header else []
    parts.extend(blocks)
    return '\n'.join(parts)


class CodeEmitter(ABC):
    """Destination for generated modules.

    An emitter takes the rendered text blocks of a module and outputs them
    somewhere (files, strings, ...).
    """

    @abstractmethod
    def emit_module(self, blocks: Sequence[str], name: str) -> str:
        """Emit a complete Rust module.

        Args:
            blocks: Rendered items of the module, in output order.
            name: Module name, used as the file name or lookup key.

        Returns:
            Where the module went: a file path for files, the source for strings.
        """
        pass


class FileEmitter(CodeEmitter):
    """Emits generated modules as ``.rs`` files in an output directory."""

    def __init__(self, output_dir: str | Path | UPath):
        self.output_dir = UPath(output_dir)
        self._written_files: list[str] = []

    def emit_module(self, blocks: Sequence[str], name: str) -> str:
        filename = name if name.endswith('.rs') else f'{name}.rs'
        return self._write_file(filename, build_module(blocks))

    def _write_file(self, filename: str, content: str) -> str:
        """Write one module file, creating the output directory if needed.

        Raises:
            OutputError: If the directory or file cannot be written.
        """
        file_path = self.output_dir / filename
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise OutputError(str(file_path), cause=e)

        self._written_files.append(str(file_path))
        return str(file_path)

    def get_written_files(self) -> list[str]:
        return self._written_files.copy()


class StringEmitter(CodeEmitter):
    """Emits generated modules as strings.

    Useful for testing or when the generated code is post-processed before
    being written.
    """

    def __init__(self):
        self._modules: dict[str, str] = {}

    def emit_module(self, blocks: Sequence[str], name: str) -> str:
        source = build_module(blocks)
        self._modules[name] = source
        return source

    def get_module(self, name: str) -> str | None:
        return self._modules.get(name)

    def get_all_modules(self) -> dict[str, str]:
        return self._modules.copy()
