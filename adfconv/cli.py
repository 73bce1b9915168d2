"""Command line entry point: convert a Markdown or HTML file to ADF JSON."""

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from adfconv.adf.models import to_adf
from adfconv.config import get_settings
from adfconv.converters.document import html_to_adf
from adfconv.exceptions import ADFConversionError, InputReadError
from adfconv.logging_config import configure_logging
from adfconv.markdown import markdown_to_adf

_HTML_SUFFIXES = {".html", ".htm"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="adfconv", description="Convert Markdown or HTML to ADF JSON")
    parser.add_argument("input", type=Path, help="Markdown or HTML file, '-' for stdin")
    parser.add_argument(
        "--html",
        action="store_true",
        help="Treat input as HTML (default: by file suffix, Markdown otherwise)",
    )
    parser.add_argument(
        "--file-context",
        default=None,
        help="Path used to resolve relative links (default: the input path)",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("--log-level", default=None, help="Log level (default: from settings)")
    return parser


def read_input(path: Path) -> str:
    if str(path) == "-":
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(path, str(e)) from e


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level, json_output=settings.log_json)

    file_context = args.file_context
    if file_context is None:
        file_context = "" if str(args.input) == "-" else str(args.input)
    is_html = args.html or args.input.suffix.lower() in _HTML_SUFFIXES

    try:
        source = read_input(args.input)
        if is_html:
            document = html_to_adf(source, file_context, settings)
        else:
            document = markdown_to_adf(source, file_context, settings)
    except ADFConversionError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    print(json.dumps(to_adf(document), indent=args.indent or None, ensure_ascii=False))
    return 0


def main() -> None:
    sys.exit(run())
