"""
Text Extractor Tests
"""
from unittest.mock import MagicMock, patch

import pytest

from conftest import SAMPLE_TEXT, build_pdf
from features.extract.application.use_cases import build_text_extractor
from features.extract.domain.errors import DEFAULT_EXTRACTION_ERROR, ExtractionFailedError
from features.extract.infrastructure.text_extractor_pdfplumber import PdfplumberTextExtractor
from features.extract.infrastructure.text_extractor_pymupdf import PyMuPDFTextExtractor


class TestPyMuPDFTextExtractor:
    """Default engine"""

    def test_extracts_text(self, pdf_bytes):
        assert PyMuPDFTextExtractor().extract_text(pdf_bytes) == SAMPLE_TEXT

    def test_pages_in_order(self):
        text = PyMuPDFTextExtractor().extract_text(build_pdf("first page", "second page"))
        assert text.index("first page") < text.index("second page")

    def test_deterministic(self, pdf_bytes):
        extractor = PyMuPDFTextExtractor()
        assert extractor.extract_text(pdf_bytes) == extractor.extract_text(pdf_bytes)

    def test_result_is_trimmed(self, pdf_bytes):
        text = PyMuPDFTextExtractor().extract_text(pdf_bytes)
        assert text == text.strip()

    def test_malformed_pdf(self):
        with pytest.raises(ExtractionFailedError) as exc_info:
            PyMuPDFTextExtractor().extract_text(b"definitely not a pdf")
        assert str(exc_info.value)

    def test_empty_bytes(self):
        with pytest.raises(ExtractionFailedError):
            PyMuPDFTextExtractor().extract_text(b"")


class TestPyMuPDFResourceRelease:
    """The document is closed on success and on failure"""

    def _mock_doc(self, page):
        doc = MagicMock()
        doc.__iter__.return_value = iter([page])
        return doc

    def test_closed_after_success(self):
        page = MagicMock()
        page.get_text.return_value = "  padded text \n"
        doc = self._mock_doc(page)

        with patch("features.extract.infrastructure.text_extractor_pymupdf.fitz") as fitz_mock:
            fitz_mock.open.return_value = doc
            text = PyMuPDFTextExtractor().extract_text(b"%PDF-1.4")

        assert text == "padded text"
        doc.close.assert_called_once()

    def test_closed_after_failure(self):
        page = MagicMock()
        page.get_text.side_effect = RuntimeError("broken content stream")
        doc = self._mock_doc(page)

        with patch("features.extract.infrastructure.text_extractor_pymupdf.fitz") as fitz_mock:
            fitz_mock.open.return_value = doc
            with pytest.raises(ExtractionFailedError) as exc_info:
                PyMuPDFTextExtractor().extract_text(b"%PDF-1.4")

        assert exc_info.value.reason == "broken content stream"
        doc.close.assert_called_once()


class TestPdfplumberTextExtractor:
    """Alternate engine"""

    def test_extracts_text(self, pdf_bytes):
        text = PdfplumberTextExtractor().extract_text(pdf_bytes)
        assert "".join(text.split()) == "".join(SAMPLE_TEXT.split())

    def test_malformed_pdf(self):
        with pytest.raises(ExtractionFailedError):
            PdfplumberTextExtractor().extract_text(b"definitely not a pdf")


class TestBuildTextExtractor:
    def test_default_engine(self):
        assert isinstance(build_text_extractor(), PyMuPDFTextExtractor)

    def test_pdfplumber_engine(self):
        assert isinstance(build_text_extractor("pdfplumber"), PdfplumberTextExtractor)

    def test_unknown_engine(self):
        with pytest.raises(ValueError):
            build_text_extractor("tesseract")


def test_extraction_failed_default_message():
    assert str(ExtractionFailedError("")) == DEFAULT_EXTRACTION_ERROR
