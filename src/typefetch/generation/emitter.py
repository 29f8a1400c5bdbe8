"""Type emission utilities for code generation.

This module provides the TypeEmitter class which converts OpenAPI schema
objects into TypeScript type expression strings.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import cast

from ..naming import escape_object_key, pascal_case
from ..openapi import SchemaObject

logger = logging.getLogger(__name__)

_PLAIN_TYPES = frozenset({"boolean", "string", "number", "integer", "object", "array", "null"})
_COMBINATORS = ("enum", "oneOf", "anyOf", "allOf")


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while emitting a type.

    Attributes:
        message: Human-readable explanation
        schema: The schema node the problem was found in
    """

    message: str
    schema: object


@dataclass
class TypeEmitter:
    """Converts OpenAPI schemas to TypeScript type expressions.

    Modifiers are not mutually exclusive, so ``emit`` checks them in a fixed
    priority order (reference, nullable, not, additionalProperties, allOf,
    oneOf, anyOf, enum, type) and strips each one before recursing on the
    rest of the node.

    Attributes:
        document: The OpenAPI document the schemas belong to
        diagnostics: Non-fatal problems collected across all emit() calls

    Example:
        >>> emitter = TypeEmitter({})
        >>> emitter.emit({"type": "array", "items": {"type": "integer"}})
        '(number)[]'
        >>> emitter.emit({"type": "integer"}, coerce_to_string=True)
        '`${number}`'
        >>> emitter.emit({"oneOf": [{"type": "string"}, {"enum": ["a"]}]})
        'NonNullable<string>|"a"'
    """

    document: Mapping[str, object]
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def emit(self, schema: SchemaObject | None, coerce_to_string: bool = False) -> str | None:
        """Convert an OpenAPI schema to a TypeScript type expression.

        Args:
            schema: The schema or reference object to convert, or None
            coerce_to_string: Map scalars to the string forms they serialize to,
                as needed for query strings and form bodies

        Returns:
            The type expression, or None when the schema has no representable type
        """
        if not isinstance(schema, Mapping):
            return None
        if "$ref" in schema:
            return pascal_case(schema["$ref"].split("/")[-1])

        if schema.get("nullable") is not None:
            base = self.emit(_without(schema, "nullable"), coerce_to_string)
            if base is not None:
                return f"{base}|null"
            return "null"

        if schema.get("not") is not None:
            base = self.emit(_without(schema, "not"), coerce_to_string)
            exclude = self.emit(schema["not"], coerce_to_string)
            if base is not None and exclude is not None:
                return f"Exclude<{base}, {exclude}>"
            return base

        additional = schema.get("additionalProperties")
        if additional is True or isinstance(additional, Mapping):
            base = self.emit(_without(schema, "additionalProperties"), coerce_to_string)
            if base is None:
                return None
            extra = None
            if isinstance(additional, Mapping):
                extra = self.emit(cast(SchemaObject, additional), coerce_to_string)
            return f"{base}&{extra or 'Record<string, unknown>'}"

        if schema.get("allOf") is not None:
            types = [self.emit(item, coerce_to_string) for item in schema["allOf"]]
            return "&".join(item for item in types if item) or None

        if schema.get("oneOf") is not None:
            types = [item for item in (self.emit(member, coerce_to_string) for member in schema["oneOf"]) if item]
            return "|".join(_safe_union(types)) or None

        if schema.get("anyOf") is not None:
            return self._emit_any_of(schema, coerce_to_string)

        if schema.get("enum") is not None:
            return "|".join(json.dumps(value, ensure_ascii=False) for value in schema["enum"]) or None

        schema_type = schema.get("type")
        if isinstance(schema_type, list):
            types = [self.emit(_with_type(schema, item), coerce_to_string) for item in schema_type]
            return "|".join(dict.fromkeys(item for item in types if item)) or None
        return self._emit_typed(schema, schema_type, coerce_to_string)

    def _emit_typed(self, schema: SchemaObject, schema_type: object, coerce_to_string: bool) -> str | None:
        if schema_type == "boolean":
            return "`${boolean}`" if coerce_to_string else "boolean"
        if schema_type == "string":
            return "string"
        if schema_type in ("number", "integer"):
            return "`${number}`" if coerce_to_string else "number"
        if schema_type == "object":
            properties = schema.get("properties")
            if properties is not None:
                return self._emit_properties(properties, schema.get("required", []), coerce_to_string)
            return "Record<string, string>" if coerce_to_string else "Record<string, unknown>"
        if schema_type == "array":
            items = self.emit(schema.get("items"), coerce_to_string)
            if items is not None:
                return f"({items})[]"
            return "string[]" if coerce_to_string else "unknown[]"
        if schema_type == "null":
            return "`${null}`" if coerce_to_string else "null"
        return None

    def _emit_properties(
        self,
        properties: dict[str, SchemaObject],
        required: list[str],
        coerce_to_string: bool,
    ) -> str:
        if not properties:
            return "Record<string, never>"
        members = []
        for name, prop_schema in properties.items():
            prop_type = self.emit(prop_schema, coerce_to_string) or "unknown"
            optional = "" if name in required else "?"
            members.append(f"{escape_object_key(name)}{optional}:{prop_type}")
        return "{" + ";".join(members) + "}"

    def _emit_any_of(self, schema: SchemaObject, coerce_to_string: bool) -> str | None:
        members = schema["anyOf"]
        objects = [member for member in members if isinstance(member, Mapping) and member.get("type") == "object"]
        if len(objects) > 1:
            self.warn(
                "Usage of anyOf operator with objects is not converted to the equivalent TypeScript type",
                schema,
            )

        # Plain scalar/object/array/null members cannot be narrowed away by a
        # bare string, every other member might be.
        plain = all(
            isinstance(member, Mapping)
            and member.get("type") in _PLAIN_TYPES
            and not any(key in member for key in _COMBINATORS)
            for member in members
        )
        types = [item for item in (self.emit(member, coerce_to_string) for member in members) if item]
        if not plain:
            types = _safe_union(types)
        return "|".join(dict.fromkeys(types)) or None

    def warn(self, message: str, schema: object) -> None:
        """Record a non-fatal diagnostic and log it."""
        self.diagnostics.append(Diagnostic(message=message, schema=schema))
        logger.warning("%s: %s", message, json.dumps(schema, default=str))


def to_schema_type(
    document: Mapping[str, object],
    schema: SchemaObject | None,
    coerce_to_string: bool = False,
) -> str | None:
    """Map one schema node to a TypeScript type expression.

    Shorthand for ``TypeEmitter(document).emit(schema, coerce_to_string)``.
    """
    return TypeEmitter(document).emit(schema, coerce_to_string)


def _safe_union(types: list[str]) -> list[str]:
    """Prevent a bare ``string`` member from absorbing literal members.

    ``string | "a"`` narrows to ``string`` while ``NonNullable<string> | "a"``
    keeps the literal visible to editors and narrowing.
    """
    if len(types) <= 1:
        return types
    return ["NonNullable<string>" if item == "string" else item for item in types]


def _without(schema: SchemaObject, key: str) -> SchemaObject:
    return cast(SchemaObject, {name: value for name, value in schema.items() if name != key})


def _with_type(schema: SchemaObject, schema_type: object) -> SchemaObject:
    narrowed = dict(schema)
    narrowed["type"] = schema_type
    return cast(SchemaObject, narrowed)
