from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import cast
from urllib.parse import urlparse

from .errors import SpecError
from .openapi import OpenAPIDocument

logger = logging.getLogger(__name__)

OpenAPISource = str | PathLike[str] | Mapping[str, object]


def load_openapi(source: OpenAPISource) -> OpenAPIDocument:
    """Load an OpenAPI document from various sources.

    Local ``$ref`` pointers are left in place: referenced schemas are emitted
    as named types rather than inlined.

    Args:
        source: Can be a file path (str or PathLike), URL, or a dict-like object

    Returns:
        The decoded OpenAPI document

    Raises:
        SpecError: If the document cannot be fetched, parsed, or is not an
            OpenAPI object
    """
    document = _read_source(source)
    if not isinstance(document, dict):
        raise SpecError("OpenAPI document must be an object")
    openapi_version = document.get("openapi")
    if not isinstance(openapi_version, str):
        raise SpecError("Missing or invalid 'openapi' field in document")
    return cast(OpenAPIDocument, document)


def _is_url(source: str) -> bool:
    """Check if the source string is a URL."""
    parsed = urlparse(source)
    return parsed.scheme in {"http", "https"}


def _fetch_url(url: str) -> str:
    """Fetch content from a URL.

    Raises:
        SpecError: If the URL cannot be fetched
    """
    from urllib.request import Request, urlopen

    try:
        request = Request(url, headers={"User-Agent": "typefetch"})
        with urlopen(request, timeout=30) as response:  # noqa: S310
            return response.read().decode("utf-8")
    except Exception as exc:
        raise SpecError(f"Failed to fetch URL: {url}") from exc


def _get_url_extension(url: str) -> str:
    """Extract file extension from URL path."""
    path = urlparse(url).path
    if "." in path:
        return "." + path.rsplit(".", 1)[-1].lower()
    return ""


def _read_source(source: OpenAPISource) -> object:
    """Read an OpenAPI document from a mapping, URL or file path."""
    if isinstance(source, Mapping):
        return dict(source)

    source_str = str(source) if isinstance(source, PathLike) else source

    if _is_url(source_str):
        logger.info("Fetching OpenAPI schema from %s", source_str)
        text = _fetch_url(source_str)
        if _get_url_extension(source_str) in {".yaml", ".yml"}:
            return _load_yaml(text)
        return _load_json_or_yaml(text)

    path = Path(source_str)
    logger.info("Reading OpenAPI schema from %s", path)
    text = path.read_text(encoding="utf-8")
    if path.suffix in {".yaml", ".yml"}:
        return _load_yaml(text)
    return _load_json_or_yaml(text)


def _load_json_or_yaml(text: str) -> object:
    """Try to load as JSON, fall back to YAML if that fails."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        logger.debug("Document is not JSON, trying YAML")
        return _load_yaml(text)


def _load_yaml(text: str) -> object:
    """Load YAML text, requiring PyYAML to be installed."""
    try:
        import yaml
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise SpecError("PyYAML is required to load YAML specs") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SpecError(f"Failed to parse OpenAPI document: {exc}") from exc
