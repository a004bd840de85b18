"""
Plain-text extraction with PyMuPDF.

The document is opened straight from memory, every page's text is collected
in page order, and the document is closed on every exit path.
"""

from __future__ import annotations

import logging
from typing import List

import fitz  # PyMuPDF

from features.extract.domain.errors import ExtractionFailedError
from features.extract.domain.interfaces import ITextExtractor

logger = logging.getLogger(__name__)


class PyMuPDFTextExtractor(ITextExtractor):
    """Default extraction engine."""

    engine = "pymupdf"

    def extract_text(self, data: bytes) -> str:
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            logger.warning("PyMuPDF could not open document: %s", e)
            raise ExtractionFailedError(str(e)) from e

        try:
            pages: List[str] = [page.get_text() for page in doc]
            logger.debug("Extracted %d page(s) with PyMuPDF", len(pages))
        except Exception as e:
            logger.warning("PyMuPDF failed while reading pages: %s", e)
            raise ExtractionFailedError(str(e)) from e
        finally:
            doc.close()

        return "\n".join(pages).strip()
