from __future__ import annotations

import re

_SPLIT_PATTERNS = (
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
)
_STRIP_PATTERN = re.compile(r"[^A-Za-z0-9]+")
_IDENTIFIER_PATTERN = re.compile(r"^[a-zA-Z_$][0-9a-zA-Z_$]*$")


def split_words(value: str) -> list[str]:
    """Split a string on case boundaries and non-alphanumeric runs.

    Example:
        >>> split_words("HTTPErrorCode_v2")
        ['HTTP', 'Error', 'Code', 'v2']
    """
    for pattern in _SPLIT_PATTERNS:
        value = pattern.sub(r"\1 \2", value)
    value = _STRIP_PATTERN.sub(" ", value)
    return value.split()


def pascal_case(value: str) -> str:
    """Convert a schema key or pointer segment to a PascalCase type name.

    A word starting with a digit past the first position is prefixed with an
    underscore so the boundary stays visible.

    Example:
        >>> pascal_case("pet-store")
        'PetStore'
        >>> pascal_case("error_404")
        'Error_404'
    """
    parts: list[str] = []
    for index, word in enumerate(split_words(value)):
        first, rest = word[0], word[1:].lower()
        if index > 0 and first.isdigit():
            parts.append(f"_{first}{rest}")
        else:
            parts.append(f"{first.upper()}{rest}")
    return "".join(parts)


def escape_object_key(key: str) -> str:
    """Quote an object key unless it is a valid identifier."""
    if _IDENTIFIER_PATTERN.match(key):
        return key
    return f'"{key}"'
