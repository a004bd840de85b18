"""
Application use cases for the PDF text extraction feature.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from features.extract.domain.interfaces import ITextExtractor
from features.extract.infrastructure.input_resolver import decode_base64, resolve_pdf_data
from .dtos import (
    ExtractBase64RequestDTO,
    ExtractTextRequestDTO,
    ExtractTextResponseDTO,
)

logger = logging.getLogger(__name__)


SUPPORTED_ENGINES = ("pymupdf", "pdfplumber")


def build_text_extractor(engine: str = "pymupdf") -> ITextExtractor:
    """
    Build the extraction engine named by the PDF_ENGINE setting.

    Engines are imported lazily so that a missing optional library only
    matters when it is actually selected.
    """
    if engine == "pymupdf":
        from features.extract.infrastructure.text_extractor_pymupdf import PyMuPDFTextExtractor

        return PyMuPDFTextExtractor()
    if engine == "pdfplumber":
        from features.extract.infrastructure.text_extractor_pdfplumber import PdfplumberTextExtractor

        return PdfplumberTextExtractor()
    raise ValueError(
        f"Unknown PDF engine {engine!r}; expected one of: {', '.join(SUPPORTED_ENGINES)}"
    )


@dataclass
class ExtractTextUseCase:
    """
    Resolve input from a file path / Base64 file / Base64 string / inline
    constant, then extract its text.

    Depends on ITextExtractor, not on a concrete engine.
    """

    extractor: ITextExtractor
    inline_base64: str = ""

    def execute(self, request: ExtractTextRequestDTO) -> ExtractTextResponseDTO:
        data = resolve_pdf_data(request.input_spec, inline_base64=self.inline_base64)
        logger.debug("Resolved %d byte(s) of PDF data", len(data))
        text = self.extractor.extract_text(data)
        return ExtractTextResponseDTO.from_text(text)


@dataclass
class ExtractBase64UseCase:
    """Decode a Base64 payload and extract its text. File paths are never touched."""

    extractor: ITextExtractor

    def execute(self, request: ExtractBase64RequestDTO) -> ExtractTextResponseDTO:
        data = decode_base64(request.base64)
        text = self.extractor.extract_text(data)
        return ExtractTextResponseDTO.from_text(text)
