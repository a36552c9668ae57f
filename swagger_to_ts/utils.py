"""
Utility functions for the Swagger to TypeScript generator.
"""

import re

# Anything that is not a letter or digit separates words (unicode aware)
_WORD_SEPARATOR_PATTERN = re.compile(r"[\W_]+")

# A lowercase letter at the start of a word. Letters, digits and underscores
# continue a word, anything else separates words.
_WORD_START_PATTERN = re.compile(r"(^|[^0-9A-Za-z_])([a-z])")

INDENT = "  "


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "containerPort" -> "ContainerPort"
        "x-kubernetes" -> "XKubernetes"
        "étéMode" -> "ÉtéMode"
    """
    if not text:
        return ""
    words = _WORD_SEPARATOR_PATTERN.split(text)
    # Keep the rest of each word as written so camelCase survives
    return "".join(word[0].upper() + word[1:] for word in words if word)


def title(text: str) -> str:
    """Upper-case the first letter of every word, leaving other letters alone.

    Examples:
        "v1" -> "V1"
        "k8s" -> "K8s"
        "rbac.authorization" -> "Rbac.Authorization"
    """
    return _WORD_START_PATTERN.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def package_alias(package: str) -> str:
    """Import alias for a package.

    Uses the last three dotted segments, title-casing all but the first:
    "io.k8s.api.core.v1" -> "apiCoreV1". Packages are assumed to have at least
    three segments. Two packages ending in the same three segments get the
    same alias.
    """
    segments = package.split(".")[-3:]
    return segments[0] + "".join(title(segment) for segment in segments[1:])


def indent(text: str) -> str:
    """Indent every non-empty line by two spaces."""
    return "\n".join(INDENT + line if line else line for line in text.split("\n"))


def print_description(description: str) -> str:
    """Format a description as one line comment per line, each newline-terminated."""
    if not description:
        return ""
    return "".join(f"// {line}\n" for line in description.split("\n"))
