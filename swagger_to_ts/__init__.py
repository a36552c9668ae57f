"""Swagger to TypeScript Generator

Generates TypeScript classes, interfaces and namespaces from Swagger
definitions, including Kubernetes resource kinds with their
Group/Version/Kind identity.
"""

__version__ = "1.0.0"

from .config import OutputConfig, OutputMode, TypeGenConfig
from .exceptions import OutputValidationError, SchemaParseError, TypeGenError
from .generator import TypeScriptGenerator
from .parser import SwaggerParser

__all__ = [
    "TypeScriptGenerator",
    "SwaggerParser",
    "TypeGenConfig",
    "OutputConfig",
    "OutputMode",
    "TypeGenError",
    "SchemaParseError",
    "OutputValidationError",
]
