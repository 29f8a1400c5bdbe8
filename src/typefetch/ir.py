"""Intermediate Representation (IR) for OpenAPI documents.

This module defines the IR data structures that represent OpenAPI operations
in a simplified, generation-friendly format. Building the IR is where
references to parameters, request bodies and responses are resolved, path
and operation parameters are merged, and response keys are expanded into
concrete status code sets.

Key classes:
- IRDocument: Root container for schemas and operations
- OperationIR: Represents one HTTP method on one path pattern
- ParameterIR: Represents a merged request parameter
- RequestBodyIR: Represents a resolved request body
- ResponseIR: Represents a resolved response and the codes it applies to
- MediaTypeIR: Represents a media type with schema
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import cast

from .errors import SpecError, StatusCodeError
from .openapi import (
    MediaTypeObject,
    OpenAPIDocument,
    OperationObject,
    ParameterObject,
    PathItemObject,
    RequestBodyObject,
    ResponseObject,
    SchemaObject,
)
from .resolver import is_reference, resolve_object
from .status import STATUS_CODES, expand_status_codes

logger = logging.getLogger(__name__)

METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


@dataclass(frozen=True)
class SchemaIR:
    """A reusable schema from components/schemas.

    Attributes:
        name: The schema key as written in the document
        schema: The schema or reference object
    """

    name: str
    schema: SchemaObject


@dataclass(frozen=True)
class MediaTypeIR:
    content_type: str
    schema: SchemaObject | None


@dataclass(frozen=True)
class ParameterIR:
    """Intermediate representation of a request parameter.

    Attributes:
        name: The parameter name, unique within one operation
        location: Where the parameter is sent ("path", "query", "header", "cookie")
        required: Whether the parameter is required
        schema: The parameter's schema, if specified
        allow_empty_value: Whether a query parameter may be sent without a value
    """

    name: str
    location: str
    required: bool
    schema: SchemaObject | None
    allow_empty_value: bool = False


@dataclass(frozen=True)
class RequestBodyIR:
    required: bool
    content: list[MediaTypeIR]


@dataclass(frozen=True)
class ResponseIR:
    """Intermediate representation of an HTTP response.

    Attributes:
        status: The response key as declared (e.g., "200", "4XX", "default")
        status_codes: The concrete codes the key expands to
        content: Possible response content types and their schemas
    """

    status: str
    status_codes: tuple[int, ...]
    content: list[MediaTypeIR]


@dataclass(frozen=True)
class OperationIR:
    """Intermediate representation of an HTTP operation (endpoint).

    Attributes:
        method: The HTTP method (lowercase: "get", "post", etc.)
        path: The URL path pattern (e.g., "/users/{id}")
        summary: Short summary of the operation
        description: Long description of the operation
        deprecated: Whether the operation is marked deprecated
        parameters: Merged parameter table keyed by parameter name
        request_body: The resolved request body, if any
        responses: Resolved responses with their status code sets
    """

    method: str
    path: str
    summary: str | None
    description: str | None
    deprecated: bool
    parameters: dict[str, ParameterIR]
    request_body: RequestBodyIR | None
    responses: list[ResponseIR]


@dataclass(frozen=True)
class IRDocument:
    """Root container for the intermediate representation.

    Attributes:
        schemas: All schema definitions from components/schemas
        operations: All HTTP operations from paths, in document order
    """

    schemas: list[SchemaIR]
    operations: list[OperationIR]


def build_ir(document: OpenAPIDocument, registry: Iterable[int] = STATUS_CODES) -> IRDocument:
    """Build an intermediate representation from an OpenAPI document.

    Args:
        document: A decoded OpenAPI document; local $refs are left in place
        registry: The status codes response classes and "default" expand to

    Returns:
        An IRDocument containing schemas and operations

    Raises:
        SpecError: If an operation is undefined, a reference cannot be
            resolved or a response key is invalid
    """
    operations: list[OperationIR] = []
    for path, item in (document.get("paths") or {}).items():
        operations.extend(build_path_operations(document, path, item, registry))
    return IRDocument(schemas=build_schemas(document), operations=operations)


def build_schemas(document: OpenAPIDocument) -> list[SchemaIR]:
    """Collect components/schemas in declaration order."""
    components = document.get("components") or {}
    return [SchemaIR(name=name, schema=schema) for name, schema in (components.get("schemas") or {}).items()]


def build_path_operations(
    document: OpenAPIDocument,
    path: str,
    item: PathItemObject | None,
    registry: Iterable[int] = STATUS_CODES,
) -> list[OperationIR]:
    """Build OperationIR instances for all methods in a path item."""
    if item is None:
        return []
    if is_reference(item):
        target = resolve_object(document, {"$ref": item["$ref"]})
        item = cast(PathItemObject, {**item, **target})

    logger.debug("Generating %s...", path)
    operations: list[OperationIR] = []
    for method in METHODS:
        if method not in item:
            continue
        operation = cast(OperationObject | None, item.get(method))
        if operation is None:
            raise SpecError(f"Operation is undefined for {method} {path}")
        parameters = merge_parameters(
            document,
            item.get("parameters") or [],
            operation.get("parameters") or [],
        )
        operations.append(
            OperationIR(
                method=method,
                path=path,
                summary=operation.get("summary"),
                description=operation.get("description"),
                deprecated=operation.get("deprecated") is True,
                parameters=parameters,
                request_body=_build_request_body(document, operation.get("requestBody")),
                responses=_build_responses(document, method, path, operation.get("responses") or {}, registry),
            )
        )
    return operations


def merge_parameters(
    document: Mapping[str, object],
    common: list[ParameterObject],
    specific: list[ParameterObject],
) -> dict[str, ParameterIR]:
    """Merge path-level and operation-level parameters.

    Operation-level parameters replace path-level parameters with the same
    name. Referenced parameters are resolved first.
    """
    merged: dict[str, ParameterIR] = {}
    for param in [*common, *specific]:
        resolved = resolve_object(document, param)
        name = resolved.get("name")
        if not name:
            continue
        merged[name] = _build_parameter(resolved)
    return merged


def _build_parameter(param: ParameterObject) -> ParameterIR:
    return ParameterIR(
        name=param.get("name", ""),
        location=param.get("in", ""),
        required=param.get("required") is True,
        schema=param.get("schema"),
        allow_empty_value=param.get("allowEmptyValue") is True,
    )


def _build_request_body(
    document: Mapping[str, object],
    request_body: RequestBodyObject | None,
) -> RequestBodyIR | None:
    if request_body is None:
        return None
    resolved = resolve_object(document, request_body)
    return RequestBodyIR(
        required=resolved.get("required") is True,
        content=_build_media_types(resolved.get("content") or {}),
    )


def _build_responses(
    document: Mapping[str, object],
    method: str,
    path: str,
    responses: dict[str, ResponseObject],
    registry: Iterable[int],
) -> list[ResponseIR]:
    try:
        status_codes = expand_status_codes(responses.keys(), registry)
    except StatusCodeError as exc:
        raise StatusCodeError(f"{exc} for {method} {path}") from exc

    result: list[ResponseIR] = []
    for key, response in responses.items():
        status = str(key)
        resolved = resolve_object(document, response)
        result.append(
            ResponseIR(
                status=status,
                status_codes=status_codes[status],
                content=_build_media_types(resolved.get("content") or {}),
            )
        )
    return result


def _build_media_types(content: dict[str, MediaTypeObject]) -> list[MediaTypeIR]:
    return [
        MediaTypeIR(content_type=content_type, schema=(media_type or {}).get("schema"))
        for content_type, media_type in content.items()
    ]
