"""
Input resolution: turn an InputSpec into the raw PDF bytes to extract.

Sources, highest precedence first:
  1. A PDF file on disk
  2. A text file holding Base64 (line-wrapped Base64 is fine)
  3. A Base64 string passed directly
  4. The configured inline Base64 constant

Only the highest-precedence source present is used; the others are ignored.
"""

from __future__ import annotations

import base64
import binascii
import logging
import os
import re

from features.extract.domain.entities import InputSpec
from features.extract.domain.errors import (
    EmptyInlineConstantError,
    ExtractionFailedError,
    NoInputProvidedError,
    NotAFileError,
    PdfFileNotFoundError,
)

logger = logging.getLogger(__name__)


WHITESPACE_RE = re.compile(r"\s+")
NON_ALPHABET_RE = re.compile(r"[^A-Za-z0-9+/]")


def normalize_base64(b64: str) -> str:
    """Drop every whitespace character, including newlines inside wrapped output."""
    return WHITESPACE_RE.sub("", b64)


def decode_base64(b64: str) -> bytes:
    """
    Decode a Base64 string into bytes, ignoring whitespace and missing padding.

    Raises:
        ExtractionFailedError: the payload is not Base64.
    """
    # Accept the URL-safe alphabet as well as the standard one.
    cleaned = normalize_base64(b64).replace("-", "+").replace("_", "/")
    # Padding is recomputed below from the characters that actually decode.
    cleaned = NON_ALPHABET_RE.sub("", cleaned)
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(cleaned)
    except (binascii.Error, ValueError) as e:
        raise ExtractionFailedError(f"Invalid base64 data: {e}") from e


def ensure_file_exists(path: str) -> None:
    """
    Raises:
        PdfFileNotFoundError: nothing exists at path.
        NotAFileError: path is a directory or other non-regular entry.
    """
    if not os.path.exists(path):
        raise PdfFileNotFoundError(path)
    if not os.path.isfile(path):
        raise NotAFileError(path)


def validate_input_spec(spec: InputSpec, inline_base64: str = "") -> None:
    """
    Check that the spec names a usable source. No I/O happens here.

    Raises:
        EmptyInlineConstantError: --use-inline-b64 with a blank constant.
        NoInputProvidedError: no source at all.
    """
    if spec.use_inline_b64 and not inline_base64.strip():
        raise EmptyInlineConstantError()
    if not spec.has_any_source():
        raise NoInputProvidedError()


def resolve_pdf_data(spec: InputSpec, inline_base64: str = "") -> bytes:
    """
    Resolve the PDF bytes for a single invocation.

    Args:
        spec: Requested input sources.
        inline_base64: Value of the inline Base64 constant, passed in from
            configuration rather than read from a global.

    Returns:
        The raw PDF bytes.
    """
    validate_input_spec(spec, inline_base64)

    if spec.pdf_path:
        ensure_file_exists(spec.pdf_path)
        logger.debug("Reading PDF from %s", spec.pdf_path)
        with open(spec.pdf_path, "rb") as f:
            return f.read()

    if spec.input_b64_file:
        ensure_file_exists(spec.input_b64_file)
        logger.debug("Reading Base64 PDF from %s", spec.input_b64_file)
        with open(spec.input_b64_file, "r", encoding="utf-8") as f:
            return decode_base64(f.read())

    if spec.input_b64:
        logger.debug("Decoding Base64 PDF from argument (%d chars)", len(spec.input_b64))
        return decode_base64(spec.input_b64)

    logger.debug("Decoding inline Base64 PDF constant")
    return decode_base64(inline_base64)
