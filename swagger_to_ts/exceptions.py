"""Exceptions raised by the Swagger to TypeScript generator.

Unknown Type or Definition variants are not represented here: they fail with
an AssertionError from ``assert_never`` and must not be caught.
"""


class TypeGenError(Exception):
    """Base exception for all generator errors."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class SchemaParseError(TypeGenError):
    """A Swagger document could not be turned into definitions.

    Attributes:
        path: Location in the document, e.g. "#/definitions/io.k8s.api.core.v1.Pod"
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class OutputValidationError(TypeGenError):
    """Generated code failed the pre-write check."""
