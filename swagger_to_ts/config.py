"""
Configuration for the Swagger to TypeScript generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_KUBERNETES_OBJECT_MODULE = "@googlecontainertools/kpt-functions"


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite
    SKIP_UNCHANGED = "skip-unchanged"  # Overwrite only files whose content changed


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check generated code before writing
        atomic_write: Whether to write through a temporary file
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class TypeGenConfig:
    """Configuration options for code generation."""

    # Module the KubernetesObject interface is imported from
    kubernetes_object_module: str = DEFAULT_KUBERNETES_OBJECT_MODULE

    # Definition keys (e.g. "io.k8s.api.core.v1.Binding") to skip when loading
    ignore_definitions: list[str] = field(default_factory=list)

    # Add generation comment at top of each file
    add_generation_comment: bool = False

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> TypeGenConfig:
        """Create a config from a dictionary."""
        config = TypeGenConfig()
        for k, v in d.items():
            if k == "output":
                config.output = OutputConfig(
                    mode=OutputMode(v.get("mode", OutputMode.ERROR_IF_EXISTS.value)),
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "kubernetes_object_module": self.kubernetes_object_module,
            "ignore_definitions": self.ignore_definitions,
            "add_generation_comment": self.add_generation_comment,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
