#!/usr/bin/env python3
"""
Command-line PDF text extraction.

Reads a PDF from a file, a Base64 string, a file holding Base64, or the
configured inline Base64 constant, and writes its plain text to stdout or to
a file.

Examples:
  extract-pdf-text input.pdf
  extract-pdf-text input.pdf -o out/input.txt
  extract-pdf-text --input-b64 JVBERi0xLjQK...
  extract-pdf-text --input-b64-file payload.b64 --output text.txt
  INLINE_BASE64=JVBERi0xLjQK... extract-pdf-text --use-inline-b64
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, TextIO

from config import Settings, get_settings
from features.extract.application.dtos import ExtractTextRequestDTO
from features.extract.application.use_cases import ExtractTextUseCase, build_text_extractor
from features.extract.domain.entities import InputSpec
from features.extract.domain.errors import InvalidArgumentsError, MissingDependencyError
from features.extract.domain.interfaces import ITextExtractor

logger = logging.getLogger(__name__)


# engine -> (distribution name, install command)
ENGINE_DEPENDENCIES = {
    "pymupdf": ("PyMuPDF", "pip install pymupdf"),
    "pdfplumber": ("pdfplumber", "pip install pdfplumber"),
}


class _ArgumentParser(argparse.ArgumentParser):
    """Raise InvalidArgumentsError instead of exiting with status 2."""

    def error(self, message: str):
        raise InvalidArgumentsError(message)


def _option_value(option: str):
    def check(value: str) -> str:
        if not value or value.startswith("-"):
            raise argparse.ArgumentTypeError(f"Missing value for {option} option.")
        return value

    return check


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="extract-pdf-text",
        description="Extract plain text from a PDF file or Base64 payload.",
        allow_abbrev=False,
        add_help=False,
    )
    parser.add_argument("pdf_path", nargs="?", help="Path to input PDF")
    parser.add_argument(
        "-o", "--output",
        dest="output_path",
        type=_option_value("--output"),
        help="Write text to this file (parent directories are created) instead of stdout",
    )
    parser.add_argument(
        "--input-b64",
        type=_option_value("--input-b64"),
        help="Base64-encoded PDF passed directly",
    )
    parser.add_argument(
        "--input-b64-file",
        type=_option_value("--input-b64-file"),
        help="Path to a text file holding a Base64-encoded PDF",
    )
    parser.add_argument(
        "--use-inline-b64",
        action="store_true",
        help="Use the INLINE_BASE64 constant from configuration",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    """
    Raises:
        InvalidArgumentsError: unrecognized flag, a second positional, or a
            flag missing its value.
    """
    return build_parser().parse_args(argv)


def load_text_extractor(engine: str) -> ITextExtractor:
    """
    Raises:
        MissingDependencyError: the engine's library is not installed.
    """
    try:
        return build_text_extractor(engine)
    except ImportError as e:
        package, install_hint = ENGINE_DEPENDENCIES.get(engine, (engine, f"pip install {engine}"))
        raise MissingDependencyError(package, install_hint) from e


def save_output(text: str, output_path: str) -> None:
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def write_stdout(text: str, stream: TextIO) -> None:
    stream.write(text)
    if not text.endswith("\n"):
        stream.write("\n")


def run(args: argparse.Namespace, extractor: ITextExtractor, settings: Settings) -> None:
    spec = InputSpec(
        pdf_path=args.pdf_path,
        input_b64=args.input_b64,
        input_b64_file=args.input_b64_file,
        use_inline_b64=args.use_inline_b64,
    )
    use_case = ExtractTextUseCase(extractor=extractor, inline_base64=settings.inline_base64)
    result = use_case.execute(ExtractTextRequestDTO(input_spec=spec))
    logger.info("Extracted %d character(s)", result.length)

    if args.output_path:
        save_output(result.text, args.output_path)
        logger.info("Saved text to %s", args.output_path)
    else:
        write_stdout(result.text, sys.stdout)


def main(
    argv: Optional[list[str]] = None,
    extractor: Optional[ITextExtractor] = None,
    settings: Optional[Settings] = None,
) -> int:
    settings = settings or get_settings()

    if extractor is None:
        try:
            extractor = load_text_extractor(settings.pdf_engine)
        except MissingDependencyError as e:
            print(str(e), file=sys.stderr)
            print(f"Install it with `{e.install_hint}` and rerun the script.", file=sys.stderr)
            return 1
        except ValueError as e:
            print(f"Failed to load PDF engine: {e}", file=sys.stderr)
            return 1

    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            stream=sys.stderr,
        )
        run(args, extractor, settings)
    except Exception as exc:
        print(f"Failed to extract text: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
