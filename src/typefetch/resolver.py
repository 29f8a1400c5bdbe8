"""Local JSON reference resolution.

Only pointers into the same document (``#/...``) are supported. Resolution is a
pure lookup into the immutable document, so nothing is cached.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar, cast

from .errors import ReferenceCycleError, ResolutionError

T = TypeVar("T")


def resolve(document: Mapping[str, object], ref: str) -> object:
    """Resolve a local ``$ref`` pointer to the value it addresses.

    Args:
        document: The OpenAPI document the pointer refers into
        ref: The pointer (e.g., "#/components/schemas/Pet")

    Returns:
        The exact value stored at the pointer location

    Raises:
        ResolutionError: If the pointer is not local, or a segment is missing,
            nullish or not traversable
    """
    if not ref.startswith("#/"):
        raise ResolutionError(ref, "is not supported, only references which start with #/ are")

    current: object = document
    for part in ref[2:].split("/"):
        key = part.replace("~1", "/").replace("~0", "~")
        if current is None:
            raise ResolutionError(ref, "has hit a nullish part")
        if isinstance(current, Mapping):
            if key not in current:
                raise ResolutionError(ref, "does not exist")
            current = current[key]
        elif isinstance(current, list):
            if not key.isdigit() or int(key) >= len(current):
                raise ResolutionError(ref, "does not exist")
            current = current[int(key)]
        else:
            raise ResolutionError(ref, "has hit a non-traversable part")
    return current


def resolve_object(document: Mapping[str, object], node: T) -> T:
    """Return ``node`` with any chain of ``$ref`` wrappers followed.

    A reference whose target is itself a reference is followed until a
    non-reference value is reached.

    Raises:
        ReferenceCycleError: If a pointer is visited twice while following the chain
    """
    chain: list[str] = []
    current: object = node
    while isinstance(current, Mapping) and isinstance(current.get("$ref"), str):
        ref = cast(str, current["$ref"])
        if ref in chain:
            raise ReferenceCycleError(chain[chain.index(ref) :] + [ref])
        chain.append(ref)
        current = resolve(document, ref)
    return cast(T, current)


def is_reference(node: object) -> bool:
    return isinstance(node, Mapping) and "$ref" in node
