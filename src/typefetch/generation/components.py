from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from ..ir import SchemaIR, build_schemas
from ..naming import pascal_case
from ..openapi import OpenAPIDocument
from .declarations import DocTag, JSDoc, Scope, TypeAliasDeclaration
from .emitter import TypeEmitter

logger = logging.getLogger(__name__)


def add_components(
    scope: Scope,
    document: OpenAPIDocument,
    emitter: TypeEmitter | None = None,
    schemas: list[SchemaIR] | None = None,
) -> None:
    """Add an exported type alias for every schema in components/schemas."""
    emitter = emitter or TypeEmitter(document)
    if schemas is None:
        schemas = build_schemas(document)
    logger.info("Adding OpenAPI components")
    for schema_ir in schemas:
        logger.debug("Adding %s...", schema_ir.name)
        scope.add(component_alias(emitter, schema_ir))
    logger.info("OpenAPI components added")


def component_alias(emitter: TypeEmitter, schema_ir: SchemaIR) -> TypeAliasDeclaration:
    """Build the exported type alias for one reusable schema."""
    return TypeAliasDeclaration(
        name=pascal_case(schema_ir.name),
        type=emitter.emit(schema_ir.schema) or "unknown",
        doc=schema_doc(schema_ir.schema) if isinstance(schema_ir.schema, Mapping) else JSDoc(),
    )


def schema_doc(schema: Mapping[str, object]) -> JSDoc:
    """Collect the documentation comment for a schema.

    The description block is the title as a heading followed by the
    description; deprecation, examples and the default become tags.
    """
    tags: list[DocTag] = []
    if schema.get("deprecated") is True:
        tags.append(DocTag("deprecated"))

    description = ""
    title = schema.get("title")
    if isinstance(title, str) and title.strip():
        description += f"# {title.strip()}\n"
    text = schema.get("description")
    if isinstance(text, str) and text.strip():
        description += text.strip()

    if _not_empty(schema.get("example")):
        tags.append(DocTag("example", _pretty(schema["example"])))
    examples = schema.get("examples")
    if isinstance(examples, list):
        tags.extend(DocTag("example", _pretty(example)) for example in examples)
    if "default" in schema:
        tags.append(DocTag("default", _pretty(schema["default"])))

    return JSDoc(description=description.strip() or None, tags=tuple(tags))


def _pretty(value: object) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _not_empty(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, list, dict)):
        return len(value) > 0
    return True
