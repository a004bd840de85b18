"""
Plain-text extraction with pdfplumber.

Alternate engine (PDF_ENGINE=pdfplumber). Slower than PyMuPDF but its
layout-aware text assembly sometimes reads multi-column pages better.
"""

from __future__ import annotations

import io
import logging
from typing import List

import pdfplumber

from features.extract.domain.errors import ExtractionFailedError
from features.extract.domain.interfaces import ITextExtractor

logger = logging.getLogger(__name__)


class PdfplumberTextExtractor(ITextExtractor):
    engine = "pdfplumber"

    def __init__(self, x_tolerance: float = 2, y_tolerance: float = 2):
        self.x_tolerance = x_tolerance
        self.y_tolerance = y_tolerance

    def extract_text(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages: List[str] = [
                    page.extract_text(x_tolerance=self.x_tolerance, y_tolerance=self.y_tolerance) or ""
                    for page in pdf.pages
                ]
        except Exception as e:
            logger.warning("pdfplumber failed to extract text: %s", e)
            raise ExtractionFailedError(str(e)) from e

        logger.debug("Extracted %d page(s) with pdfplumber", len(pages))
        return "\n".join(pages).strip()
