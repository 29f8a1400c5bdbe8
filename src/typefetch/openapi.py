from __future__ import annotations

from typing import TypedDict

# Type aliases for JSON-like values used in OpenAPI
JsonPrimitive = str | int | float | bool | None
JsonValue = JsonPrimitive | list["JsonValue"] | dict[str, "JsonValue"]

ReferenceObject = TypedDict(
    "ReferenceObject",
    {
        "$ref": str,
        "summary": str,
        "description": str,
    },
    total=False,
)

SchemaObject = TypedDict(
    "SchemaObject",
    {
        "type": str,
        "format": str,
        "title": str,
        "description": str,
        "properties": dict[str, "SchemaObject"],
        "items": "SchemaObject",
        "required": list[str],
        "nullable": bool,
        "not": "SchemaObject",
        "enum": list[JsonValue],
        "oneOf": list["SchemaObject"],
        "anyOf": list["SchemaObject"],
        "allOf": list["SchemaObject"],
        # additionalProperties can be a bool or a SchemaObject
        "additionalProperties": object,
        "default": JsonValue,
        "example": JsonValue,
        "examples": list[JsonValue],
        "deprecated": bool,
        "$ref": str,
    },
    total=False,
)

MediaTypeObject = TypedDict(
    "MediaTypeObject",
    {
        "schema": SchemaObject,
    },
    total=False,
)

ResponseObject = TypedDict(
    "ResponseObject",
    {
        "description": str,
        "headers": dict[str, object],
        "content": dict[str, MediaTypeObject],
        "$ref": str,
    },
    total=False,
)

RequestBodyObject = TypedDict(
    "RequestBodyObject",
    {
        "description": str,
        "content": dict[str, MediaTypeObject],
        "required": bool,
        "$ref": str,
    },
    total=False,
)

ParameterObject = TypedDict(
    "ParameterObject",
    {
        "name": str,
        "in": str,
        "description": str,
        "required": bool,
        "deprecated": bool,
        "allowEmptyValue": bool,
        "schema": SchemaObject,
        "$ref": str,
    },
    total=False,
)

OperationObject = TypedDict(
    "OperationObject",
    {
        "operationId": str,
        "summary": str,
        "description": str,
        "deprecated": bool,
        "parameters": list[ParameterObject],
        "requestBody": RequestBodyObject,
        "responses": dict[str, ResponseObject],
    },
    total=False,
)

PathItemObject = TypedDict(
    "PathItemObject",
    {
        "$ref": str,
        "summary": str,
        "description": str,
        "parameters": list[ParameterObject],
        "get": OperationObject,
        "put": OperationObject,
        "post": OperationObject,
        "delete": OperationObject,
        "options": OperationObject,
        "head": OperationObject,
        "patch": OperationObject,
        "trace": OperationObject,
    },
    total=False,
)

ComponentsObject = TypedDict(
    "ComponentsObject",
    {
        "schemas": dict[str, SchemaObject],
        "parameters": dict[str, ParameterObject],
        "requestBodies": dict[str, RequestBodyObject],
        "responses": dict[str, ResponseObject],
    },
    total=False,
)

ContactObject = TypedDict(
    "ContactObject",
    {
        "name": str,
        "url": str,
        "email": str,
    },
    total=False,
)

LicenseObject = TypedDict(
    "LicenseObject",
    {
        "name": str,
        "url": str,
    },
    total=False,
)

InfoObject = TypedDict(
    "InfoObject",
    {
        "title": str,
        "summary": str,
        "description": str,
        "version": str,
        "contact": ContactObject,
        "license": LicenseObject,
    },
    total=False,
)

ServerObject = TypedDict(
    "ServerObject",
    {
        "url": str,
        "description": str,
    },
    total=False,
)

OpenAPIDocument = TypedDict(
    "OpenAPIDocument",
    {
        "openapi": str,
        "info": InfoObject,
        "paths": dict[str, PathItemObject],
        "components": ComponentsObject,
        "servers": list[ServerObject],
    },
    total=False,
)
