from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import urlparse

from .generation import Diagnostic, Scope, TypeEmitter, add_components, add_paths
from .ir import build_ir
from .openapi import InfoObject, OpenAPIDocument
from .options import Options

logger = logging.getLogger(__name__)

DEFAULT_IMPORT = "https://raw.githubusercontent.com/denosaurs/typefetch/main"
DEFAULT_OUTPUT = Path("typefetch.d.ts")


@dataclass
class DefinitionsOutput:
    code: str
    diagnostics: list[Diagnostic]


def generate_source(
    document: OpenAPIDocument,
    options: Options,
    import_path: str = DEFAULT_IMPORT,
    generated_at: datetime | None = None,
) -> DefinitionsOutput:
    """Render the TypeScript declaration file for an OpenAPI document.

    Args:
        document: The decoded OpenAPI document
        options: Generation options
        import_path: Where the generated file imports the helper types from
        generated_at: Timestamp written into the header comment (defaults to now)

    Returns:
        DefinitionsOutput with the file contents and any non-fatal diagnostics
    """
    ir = build_ir(document)
    emitter = TypeEmitter(document)
    global_scope = Scope(header="declare global")
    add_paths(global_scope, document, options, emitter, ir.operations)
    components = Scope()
    add_components(components, document, emitter, ir.schemas)

    lines = module_comment(document.get("info") or {}, generated_at)
    lines.extend(_imports(import_path, options))
    lines.append("")
    lines.extend(global_scope.render())
    if components.declarations:
        lines.append("")
        lines.extend(components.render())
    return DefinitionsOutput(code="\n".join(lines).rstrip() + "\n", diagnostics=emitter.diagnostics)


def write_definitions(
    output: Path,
    document: OpenAPIDocument,
    options: Options,
    import_path: str = DEFAULT_IMPORT,
) -> DefinitionsOutput:
    result = generate_source(document, options, import_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.code, encoding="utf-8")
    logger.info("Definitions saved to %s", output)
    return result


def module_comment(info: InfoObject, generated_at: datetime | None = None) -> list[str]:
    """Build the header comment describing the API the file was generated from."""
    timestamp = (generated_at or datetime.now(timezone.utc)).isoformat()
    lines = [
        "// This file was automatically generated by [TypeFetch](https://github.com/denosaurs/typefetch) "
        f"at {timestamp}",
        "",
        "/**",
        f" * # {info.get('title', '').strip()}",
    ]

    description = (info.get("description") or "").strip()
    if description:
        lines.append(" * ")
        lines.extend(f" * {line}" for line in description.split("\n"))

    summary = (info.get("summary") or "").strip()
    if summary:
        lines.append(f" * @summary {summary}")

    lines.append(" * ")
    lines.append(f" * @version {info.get('version', '').strip()}")

    license_name = ((info.get("license") or {}).get("name") or "").strip()
    if license_name:
        lines.append(f" * @license {license_name}")

    contact = info.get("contact") or {}
    author = (contact.get("name") or "").strip()
    if author:
        email = (contact.get("email") or "").strip()
        lines.append(f" * @author {author} <{email}>" if email else f" * @author {author}")

    lines.extend([" * @module", " */", ""])
    return lines


def _imports(import_path: str, options: Options) -> list[str]:
    suffix = ".ts" if _is_remote_module(import_path) else ""
    search_params_module = "urlsearchparams" if options.experimental_url_search_params else "url_search_params"
    modules = [
        ("JSONString", "json"),
        ("TypedHeadersInit", "headers"),
        ("URLSearchParamsString", search_params_module),
    ]
    return [
        f'import type {{ {name} }} from "{import_path.rstrip("/")}/types/{module}{suffix}";'
        for name, module in modules
    ]


def _is_remote_module(value: str) -> bool:
    # Deno resolves http(s) and file URL specifiers literally, so they need the
    # file extension; bare and relative specifiers go through module resolution.
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https", "file"}
