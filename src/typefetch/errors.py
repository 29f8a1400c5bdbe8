from __future__ import annotations


class TypefetchError(Exception):
    """Base error for typefetch."""


class SpecError(TypefetchError):
    """Raised when the OpenAPI document cannot be turned into declarations."""


class ResolutionError(SpecError):
    """Raised when a local $ref pointer cannot be resolved."""

    def __init__(self, ref: str, reason: str) -> None:
        super().__init__(f"Reference {ref} {reason}")
        self.ref = ref
        self.reason = reason


class ReferenceCycleError(ResolutionError):
    """Raised when following a chain of $ref pointers revisits a pointer."""

    def __init__(self, chain: list[str]) -> None:
        super().__init__(chain[0], "forms a cycle: " + " -> ".join(chain))
        self.chain = chain


class StatusCodeError(SpecError):
    """Raised for response keys that are neither a status code, a class nor default."""


class ConfigurationError(TypefetchError):
    """Raised when the options produce no usable input URL for an operation."""
