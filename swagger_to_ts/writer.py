"""
Atomic file writer for generated TypeScript.

Ensures that file writes are atomic to prevent half-written output files
from interrupted runs.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path

from .config import OutputConfig, OutputMode
from .exceptions import OutputValidationError

logger = logging.getLogger(__name__)


def _file_mode(path: Path) -> int:
    """Permission bits for path: kept from an existing file, else what open() would create."""
    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(
        self,
        output: OutputConfig | None = None,
        validate: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            output: Output handling options
            validate: Optional validation function for generated code
        """
        self.output = output or OutputConfig()
        self._validate = validate or self._default_validate

    def check(self, paths: Iterable[Path]) -> None:
        """Fail before anything is written if the output mode forbids overwriting one of paths.

        Raises:
            FileExistsError: For the first existing path in error mode
        """
        if self.output.mode is not OutputMode.ERROR_IF_EXISTS:
            return
        for path in paths:
            if path.exists():
                raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

    def write(self, path: Path, content: str) -> bool:
        """Write content to a file according to the output mode.

        Args:
            path: Target file path
            content: Content to write

        Returns:
            True if the file was written, False if it was left untouched

        Raises:
            FileExistsError: If the file exists and the mode forbids overwriting
            OutputValidationError: If validation fails
        """
        if path.exists():
            match self.output.mode:
                case OutputMode.ERROR_IF_EXISTS:
                    raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")
                case OutputMode.SKIP_UNCHANGED:
                    if path.read_text(encoding="utf-8") == content:
                        logger.debug("Unchanged, skipping %s", path)
                        return False

        if self.output.validate_before_write:
            self._validate(content)

        if self.output.atomic_write:
            self._write_atomic(path, content)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

        logger.info("Wrote %s", path)
        return True

    def _write_atomic(self, path: Path, content: str) -> None:
        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = _file_mode(path)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            # mkstemp creates the file 0600
            os.chmod(temp_path, mode)
            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

    def _default_validate(self, content: str) -> None:
        """Basic TypeScript sanity check: braces outside comments must balance."""
        code = "\n".join(line for line in content.split("\n") if not line.lstrip().startswith("//"))
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise OutputValidationError(f"Generated TypeScript has unbalanced braces: {open_braces} open, {close_braces} close")
