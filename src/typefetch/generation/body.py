from __future__ import annotations

from ..ir import MediaTypeIR, ResponseIR
from ..openapi import SchemaObject
from ..options import Options
from ..status import is_ok
from .emitter import TypeEmitter


def request_body_type(
    emitter: TypeEmitter,
    content_type: str,
    schema: SchemaObject | None,
    options: Options,
) -> str:
    """Get the ``body`` type of ``RequestInit`` for one request content type."""
    if content_type == "application/json":
        return f"JSONString<{emitter.emit(schema) or 'unknown'}>"
    if content_type == "text/plain":
        return "string"
    if content_type == "multipart/form-data":
        return "FormData"
    if content_type == "application/x-www-form-urlencoded":
        schema_type = emitter.emit(schema, coerce_to_string=True)
        if schema_type is None:
            return "URLSearchParams"
        types = [f"URLSearchParamsString<{schema_type}>"]
        # The fully typed URLSearchParamsString has no URLSearchParams counterpart.
        if not options.experimental_url_search_params:
            types.append(f"URLSearchParams<{schema_type}>")
        return f"({'|'.join(types)})"
    if content_type == "application/octet-stream":
        return "ReadableStream | Blob | BufferSource"
    return "BodyInit"


def ok_and_status(status_codes: tuple[int, ...]) -> str:
    """Get the ``ok``/``status`` members shared by every branch of a response.

    Example:
        >>> ok_and_status((200,))
        'ok: true; status: 200;'
        >>> ok_and_status((200, 404))
        'ok: boolean; status: 200|404;'
    """
    if not status_codes:
        return "ok: never; status: never;"
    if all(is_ok(code) for code in status_codes):
        ok = "true"
    elif any(is_ok(code) for code in status_codes):
        ok = "boolean"
    else:
        ok = "false"
    status = "|".join(str(code) for code in status_codes)
    return f"ok: {ok}; status: {status};"


def response_type(emitter: TypeEmitter, response: ResponseIR) -> str:
    """Get the union of ``Response`` shapes for one response entry."""
    head = ok_and_status(response.status_codes)
    if not response.content:
        return f"{{ {head} }}"
    branches = [_media_type_branch(emitter, head, media) for media in response.content]
    return f"({'|'.join(branches)})"


def _media_type_branch(emitter: TypeEmitter, head: str, media: MediaTypeIR) -> str:
    content_type = media.content_type
    if content_type == "application/json":
        body = emitter.emit(media.schema) or "unknown"
        return f"{{ {head} json(): Promise<{body}>; text(): Promise<JSONString<{body}>>; }}"
    if content_type == "text/plain":
        return f"{{ {head} text(): Promise<string>; }}"
    if content_type == "multipart/form-data":
        return f"{{ {head} formData(): Promise<FormData>; }}"
    if content_type == "text/event-stream":
        return f"{{ {head} readonly body: ReadableStream<Uint8Array>; }}"
    if content_type == "application/octet-stream":
        return (
            f"{{ {head} readonly body: ReadableStream<Uint8Array>; "
            "arrayBuffer(): Promise<ArrayBuffer>; blob(): Promise<Blob>; }"
        )
    return f"{{ {head} }}"
