"""HTTP status code registry and response-key expansion."""

from __future__ import annotations

import re
from collections.abc import Iterable
from http import HTTPStatus

from .errors import StatusCodeError

STATUS_CODES: frozenset[int] = frozenset(int(status) for status in HTTPStatus)

_LITERAL_PATTERN = re.compile(r"^[1-5][0-9]{2}$")
_CLASS_PATTERN = re.compile(r"^([0-9])XX$")


def is_ok(status_code: int) -> bool:
    """Check that an HTTP status code is in the 2xx range."""
    return 200 <= status_code < 300


def expand_status_codes(
    keys: Iterable[str],
    registry: Iterable[int] = STATUS_CODES,
) -> dict[str, tuple[int, ...]]:
    """Expand OpenAPI response keys into concrete status code sets.

    Literal keys ("404") map to themselves, class keys ("4XX") map to every
    registered code of that class and "default" maps to every registered
    code between 100 and 599 not claimed by another key.

    Args:
        keys: Response keys in declaration order; integer keys as produced
            by YAML parsers are read as their decimal text
        registry: The status codes considered valid

    Returns:
        A mapping from each key to its sorted status codes, in key order

    Raises:
        StatusCodeError: If a key has an unsupported shape or class digit
    """
    ordered = [str(key) for key in keys]
    known = frozenset(registry)
    expanded: dict[str, tuple[int, ...]] = {}
    has_default = False
    for key in ordered:
        if key == "default":
            has_default = True
            continue
        expanded[key] = _expand_key(key, known)

    if not has_default:
        return expanded

    claimed = {code for codes in expanded.values() for code in codes}
    result: dict[str, tuple[int, ...]] = {}
    for key in ordered:
        if key == "default":
            result[key] = tuple(code for code in sorted(known) if 100 <= code <= 599 and code not in claimed)
        else:
            result[key] = expanded[key]
    return result


def _expand_key(key: str, registry: frozenset[int]) -> tuple[int, ...]:
    if _LITERAL_PATTERN.match(key):
        return (int(key),)
    match = _CLASS_PATTERN.match(key)
    if match is None:
        raise StatusCodeError(f"Invalid status code {key!r}")
    digit = int(match.group(1))
    if digit < 1 or digit > 5:
        raise StatusCodeError(f"Invalid status code {key!r}")
    start = digit * 100
    return tuple(code for code in range(start, start + 100) if code in registry)
