"""Global ``fetch`` overload generation.

Every operation becomes one ``fetch`` signature per request content type.
The ``input`` parameter is a union of template literal types built from the
path pattern, the ``init`` parameter pins the method, body and headers, and
the return type is the union of the declared responses.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from ..errors import ConfigurationError
from ..ir import OperationIR, ParameterIR, build_ir
from ..naming import escape_object_key
from ..openapi import OpenAPIDocument
from ..options import Options
from .body import request_body_type, response_type
from .declarations import DocTag, FunctionDeclaration, JSDoc, Parameter, Scope, TypeParameter
from .emitter import TypeEmitter

logger = logging.getLogger(__name__)

RESPONSE_OMIT = '"ok" | "status" | "arrayBuffer" | "blob" | "formData" | "json" | "text"'

URL_FLAGS_HELP = (
    "You may want to run typefetch with one of the following options:\n"
    "  --base-urls <URLS>      A comma separated list of custom base urls for paths to start with\n"
    "  --include-server-urls   Include server URLs from the schema in the generated paths\n"
    "  --include-absolute-url  Include absolute URLs in the generated paths\n"
    "  --include-relative-url  Include relative URLs in the generated paths\n"
)


def add_paths(
    scope: Scope,
    document: OpenAPIDocument,
    options: Options,
    emitter: TypeEmitter | None = None,
    operations: list[OperationIR] | None = None,
) -> None:
    """Add the ``fetch`` overloads of every operation to ``scope``.

    ``operations`` defaults to the operations built from ``document``.
    """
    emitter = emitter or TypeEmitter(document)
    if operations is None:
        operations = build_ir(document).operations
    logger.info("Adding OpenAPI paths")
    for operation in operations:
        scope.extend(operation_functions(emitter, document, operation, options))
    logger.info("OpenAPI paths added")


def operation_functions(
    emitter: TypeEmitter,
    document: OpenAPIDocument,
    operation: OperationIR,
    options: Options,
) -> list[FunctionDeclaration]:
    """Build the ``fetch`` overloads for a single operation."""
    path = to_template_string(emitter, operation.path, operation.parameters)
    inputs = input_templates(document, path, options)
    input_type = "|".join(f"`{template}`" for template in inputs)
    return_type = operation_return_type(emitter, operation)
    type_parameters = _type_parameters(options)
    doc = _operation_doc(operation)

    request_body = operation.request_body
    variants: list[tuple[str | None, str | None]] = [(None, None)]
    if request_body is not None and request_body.content:
        variants = [
            (media.content_type, request_body_type(emitter, media.content_type, media.schema, options))
            for media in request_body.content
        ]

    functions: list[FunctionDeclaration] = []
    for content_type, body_type in variants:
        init_type = _init_type(emitter, operation, content_type, body_type)
        functions.append(
            FunctionDeclaration(
                name="fetch",
                type_parameters=type_parameters,
                parameters=(
                    Parameter(name="input", type=input_type),
                    Parameter(
                        name="init",
                        type=init_type,
                        optional=operation.method == "get" and request_body is None,
                    ),
                ),
                return_type=return_type,
                doc=doc,
            )
        )
    return functions


def to_template_string(
    emitter: TypeEmitter,
    pattern: str,
    parameters: Mapping[str, ParameterIR],
) -> str:
    """Build the template literal body for a path pattern.

    Path parameters are replaced with their types and query parameters are
    appended as a typed query string, optional unless one of them is required.

    Example:
        >>> params = {"id": ParameterIR(name="id", location="path", required=True, schema=None)}
        >>> to_template_string(TypeEmitter({}), "/pets/{id}", params)
        '/pets/${string}'
    """
    template = pattern
    query_optional = True
    query_members: list[str] = []

    for parameter in parameters.values():
        if parameter.location == "query":
            if parameter.required:
                query_optional = False
            types = [emitter.emit(parameter.schema, coerce_to_string=True) or "string"]
            if parameter.allow_empty_value:
                types.append("true")
            optional = "" if parameter.required else "?"
            query_members.append(f"{escape_object_key(parameter.name)}{optional}: {'|'.join(types)}")
        elif parameter.location == "path":
            path_type = emitter.emit(parameter.schema) or "string"
            template = template.replace(f"{{{parameter.name}}}", f"${{{path_type}}}")

    if not query_members:
        return template
    query_type = f"URLSearchParamsString<{{{';'.join(query_members)}}}>"
    if query_optional:
        return f'{template}${{`?${{{query_type}}}` | ""}}'
    return f"{template}?${{{query_type}}}"


def to_headers_init_type(
    emitter: TypeEmitter,
    parameters: Mapping[str, ParameterIR],
    additional_headers: list[str] | None = None,
) -> str | None:
    """Build a ``TypedHeadersInit`` type from header parameters.

    Default headers in ``additional_headers`` (rendered ``"Name": type``
    members) are dropped when a parameter declares the same header.
    """
    defaults = list(additional_headers or [])
    members: list[str] = []
    for parameter in parameters.values():
        if parameter.location != "header":
            continue
        defaults = [header for header in defaults if not header.startswith(f'"{parameter.name}"')]
        optional = "" if parameter.required else "?"
        members.append(f'"{parameter.name}"{optional}: {emitter.emit(parameter.schema) or "string"}')

    members = defaults + members
    if not members:
        return None
    return f"TypedHeadersInit<{{ {'; '.join(members)} }}>"


def input_templates(document: OpenAPIDocument, path: str, options: Options) -> list[str]:
    """Collect the URL templates ``fetch`` accepts for one path.

    Raises:
        ConfigurationError: If the options produce no template at all
    """
    inputs: list[str] = []
    for base_url in options.base_urls:
        base_url = base_url.strip()
        if not base_url:
            continue
        inputs.append(f"{base_url.removesuffix('/')}{path}")

    if options.include_absolute_url:
        inputs.append(f'${{"http://" | "https://"}}${{string}}{path}')

    if options.include_server_urls:
        for server in document.get("servers") or []:
            url = server.get("url")
            if url is not None:
                inputs.append(f"{url.removesuffix('/')}{path}")

    if options.include_relative_url:
        inputs.append(path)

    if not inputs:
        raise ConfigurationError(
            f"No URLs were generated for {path} with the options:\n{options.describe()}\n\n{URL_FLAGS_HELP}"
        )
    return inputs


def operation_return_type(emitter: TypeEmitter, operation: OperationIR) -> str:
    if not operation.responses:
        return "Promise<Response>"
    branches = "|".join(response_type(emitter, response) for response in operation.responses)
    return f"Promise<Omit<Response, {RESPONSE_OMIT}> & ({branches})>"


def _init_type(
    emitter: TypeEmitter,
    operation: OperationIR,
    content_type: str | None,
    body_type: str | None,
) -> str:
    omit = ["method", "body"]
    additional_headers = []
    if content_type is not None:
        additional_headers.append(f'"Content-Type": "{content_type}"')

    headers_type = to_headers_init_type(emitter, operation.parameters, additional_headers)
    if headers_type is not None:
        omit.append("headers")

    method_optional = "?" if operation.method == "get" else ""
    members = [f'method{method_optional}: "{operation.method.upper()}";']
    if body_type is not None:
        request_body = operation.request_body
        body_optional = "" if request_body is not None and request_body.required else "?"
        members.append(f"body{body_optional}: {body_type};")
    if headers_type is not None:
        members.append(f"headers: {headers_type};")

    omitted = "|".join(f'"{key}"' for key in omit)
    return f"Omit<RequestInit, {omitted}> & {{ {' '.join(members)} }}"


def _type_parameters(options: Options) -> tuple[TypeParameter, ...]:
    if not options.experimental_discriminator:
        return ()
    discriminator = json.dumps(options.experimental_discriminator)
    default = None if options.experimental_require_discriminator else discriminator
    return (TypeParameter(name="T", constraint=discriminator, default=default),)


def _operation_doc(operation: OperationIR) -> JSDoc:
    tags: list[DocTag] = []
    if operation.deprecated:
        tags.append(DocTag("deprecated"))
    if operation.summary and operation.summary.strip():
        tags.append(DocTag("summary", operation.summary.strip()))
    description = operation.description.strip() if operation.description else None
    return JSDoc(description=description or None, tags=tuple(tags))
