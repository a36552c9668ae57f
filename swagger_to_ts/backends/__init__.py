"""
Code generation backends.

Contains the TypeScript generator for definitions.
"""

from __future__ import annotations

from .typescript import (
    TypeScriptBackend,
    print_class_field,
    print_interface_field,
    render_type,
)

__all__ = [
    "TypeScriptBackend",
    "print_class_field",
    "print_interface_field",
    "render_type",
]
