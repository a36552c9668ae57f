"""
Generator: renders definitions into one TypeScript file per package.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from . import __version__
from .backends import TypeScriptBackend
from .cli_utils import reconstruct_command_line
from .config import TypeGenConfig
from .model import Definition, build_registry
from .parser import SwaggerParser
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


class TypeScriptGenerator:
    """Generates TypeScript files from definitions."""

    def __init__(self, definitions: Sequence[Definition], config: TypeGenConfig | None = None):
        """
        Initialize the generator.

        Args:
            definitions: Every definition to generate, top-level objects included
            config: Code generation configuration
        """
        self.definitions = list(definitions)
        self.config = config or TypeGenConfig()
        self.registry = build_registry(self.definitions)
        self.backend = TypeScriptBackend(self.registry, self.config)

    @classmethod
    def from_swagger(cls, swagger: dict[str, Any], config: TypeGenConfig | None = None) -> TypeScriptGenerator:
        """Create a generator for the definitions of a Swagger document."""
        definitions = SwaggerParser(config).parse(swagger)
        return cls(definitions, config)

    def files(self) -> dict[str, list[Definition]]:
        """Definitions grouped by output file, files sorted by name."""
        grouped: dict[str, list[Definition]] = {}
        for definition in self.definitions:
            grouped.setdefault(self.backend.file_name(definition), []).append(definition)
        return {name: grouped[name] for name in sorted(grouped)}

    def generate(self) -> dict[str, str]:
        """
        Render every output file.

        Returns:
            File contents keyed by file name
        """
        generation_comment = self._generate_command_comment()
        result = {}
        for file_name, definitions in self.files().items():
            logger.debug("Generating %s (%d definitions)", file_name, len(definitions))
            result[file_name] = self.backend.print_file(definitions, generation_comment)
        return result

    def write(self, output_dir: Path) -> list[Path]:
        """
        Render every file and write it under output_dir.

        Args:
            output_dir: Directory receiving the files

        Returns:
            Paths of the files actually written
        """
        writer = AtomicWriter(self.config.output)
        files = {Path(output_dir) / file_name: content for file_name, content in self.generate().items()}
        writer.check(files)
        written = []
        for path, content in files.items():
            if writer.write(path, content):
                written.append(path)
        return written

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated files"""
        if not self.config.add_generation_comment:
            return ""

        from .swagger_to_ts import swagger_to_ts as click_command  # noqa

        command_line = reconstruct_command_line(click_command)
        return f"// Generated by swagger_to_ts v{__version__} : {command_line}"
