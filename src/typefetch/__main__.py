from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .errors import TypefetchError
from .generator import DEFAULT_IMPORT, DEFAULT_OUTPUT, write_definitions
from .loader import load_openapi
from .options import Options


def _comma_list(value: str) -> tuple[str, ...]:
    return tuple(item for item in value.split(",") if item.strip())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typefetch",
        description="Generate typed fetch overloads from an OpenAPI schema.",
    )
    parser.add_argument("spec", help="Path or URL of the OpenAPI schema (JSON/YAML)")
    parser.add_argument("-o", "--output", type=Path, default=DEFAULT_OUTPUT, help="Output file path")
    parser.add_argument(
        "--import",
        dest="import_path",
        default=DEFAULT_IMPORT,
        help="Import path for the typefetch helper types",
    )
    parser.add_argument(
        "--base-urls",
        type=_comma_list,
        default=(),
        metavar="URLS",
        help="A comma separated list of custom base urls for paths to start with",
    )
    parser.add_argument(
        "--include-server-urls",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Include server URLs from the schema in the generated paths",
    )
    parser.add_argument(
        "--include-absolute-url",
        action="store_true",
        help="Include absolute URLs in the generated paths",
    )
    parser.add_argument(
        "--include-relative-url",
        action="store_true",
        help="Include relative URLs in the generated paths",
    )
    parser.add_argument(
        "--experimental-urlsearchparams",
        action="store_true",
        help="Enable the experimental fully typed URLSearchParams type",
    )
    parser.add_argument(
        "--experimental-discriminator",
        default=None,
        metavar="NAME",
        help="Tag every generated fetch overload with a discriminator type parameter",
    )
    parser.add_argument(
        "--experimental-require-discriminator",
        action="store_true",
        help="Require the discriminator type parameter instead of defaulting it",
    )
    parser.add_argument("-V", "--version", action="version", version=__version__)
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every path and schema")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
        stream=sys.stderr,
    )

    options = Options(
        base_urls=args.base_urls,
        include_absolute_url=args.include_absolute_url,
        include_server_urls=args.include_server_urls,
        include_relative_url=args.include_relative_url,
        experimental_url_search_params=args.experimental_urlsearchparams,
        experimental_discriminator=args.experimental_discriminator,
        experimental_require_discriminator=args.experimental_require_discriminator,
    )

    try:
        document = load_openapi(args.spec)
        write_definitions(args.output, document, options, args.import_path)
    except TypefetchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
