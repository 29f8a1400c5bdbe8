from __future__ import annotations

from typing import cast

import pytest

from typefetch.openapi import OpenAPIDocument


@pytest.fixture()
def minimal_openapi_document() -> dict[str, object]:
    return {
        "openapi": "3.0.3",
        "info": {"title": "Example", "version": "1.0.0"},
        "paths": {},
    }


def _json_content(ref: str) -> dict[str, object]:
    return {"application/json": {"schema": {"$ref": ref}}}


@pytest.fixture()
def petstore_document() -> OpenAPIDocument:
    error = {"description": "unexpected error", "content": _json_content("#/components/schemas/Error")}
    document = {
        "openapi": "3.0.0",
        "info": {
            "title": "Swagger Petstore",
            "version": "1.0.0",
            "license": {"name": "MIT"},
        },
        "servers": [{"url": "http://petstore.swagger.io/v1"}],
        "paths": {
            "/pets": {
                "get": {
                    "summary": "List all pets",
                    "operationId": "listPets",
                    "parameters": [
                        {
                            "name": "limit",
                            "in": "query",
                            "required": False,
                            "schema": {"type": "integer", "format": "int32"},
                        }
                    ],
                    "responses": {
                        "200": {
                            "description": "A paged array of pets",
                            "content": _json_content("#/components/schemas/Pets"),
                        },
                        "default": error,
                    },
                },
                "post": {
                    "summary": "Create a pet",
                    "operationId": "createPets",
                    "requestBody": {
                        "content": _json_content("#/components/schemas/Pet"),
                        "required": True,
                    },
                    "responses": {
                        "201": {"description": "Null response"},
                        "default": error,
                    },
                },
            },
            "/pets/{petId}": {
                "get": {
                    "summary": "Info for a specific pet",
                    "operationId": "showPetById",
                    "parameters": [
                        {
                            "name": "petId",
                            "in": "path",
                            "required": True,
                            "schema": {"type": "string"},
                        }
                    ],
                    "responses": {
                        "200": {
                            "description": "Expected response to a valid request",
                            "content": _json_content("#/components/schemas/Pet"),
                        },
                        "default": error,
                    },
                }
            },
        },
        "components": {
            "schemas": {
                "Pet": {
                    "type": "object",
                    "required": ["id", "name"],
                    "properties": {
                        "id": {"type": "integer", "format": "int64"},
                        "name": {"type": "string"},
                        "tag": {"type": "string"},
                    },
                },
                "Pets": {
                    "type": "array",
                    "maxItems": 100,
                    "items": {"$ref": "#/components/schemas/Pet"},
                },
                "Error": {
                    "type": "object",
                    "required": ["code", "message"],
                    "properties": {
                        "code": {"type": "integer", "format": "int32"},
                        "message": {"type": "string"},
                    },
                },
            }
        },
    }
    return cast(OpenAPIDocument, document)
