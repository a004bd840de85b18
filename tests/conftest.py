"""
Test Configuration and Fixtures
"""
import base64

import fitz
import pytest
from fastapi.testclient import TestClient

from config import Settings
from features.extract.domain.errors import ExtractionFailedError
from features.extract.domain.interfaces import ITextExtractor
from features.extract.presentation.api import get_text_extractor
from main import create_app


SAMPLE_TEXT = "Hello from the sample PDF"


def build_pdf(*pages: str) -> bytes:
    """Build a small PDF with one page per string."""
    doc = fitz.open()
    try:
        for text in pages:
            page = doc.new_page()
            page.insert_text((72, 72), text)
        return doc.tobytes()
    finally:
        doc.close()


class FakeExtractor(ITextExtractor):
    """Records what it was given and returns canned text (or raises)."""

    engine = "fake"

    def __init__(self, text: str = "fake text", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls = []

    def extract_text(self, data: bytes) -> str:
        self.calls.append(data)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def pdf_bytes():
    return build_pdf(SAMPLE_TEXT)


@pytest.fixture
def pdf_b64(pdf_bytes):
    return base64.b64encode(pdf_bytes).decode("ascii")


@pytest.fixture
def pdf_path(tmp_path, pdf_bytes):
    path = tmp_path / "sample.pdf"
    path.write_bytes(pdf_bytes)
    return path


@pytest.fixture
def settings():
    return Settings(port=3000, max_body_bytes=50 * 1024 * 1024, inline_base64="")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Client backed by the real PyMuPDF engine"""
    return TestClient(app)


@pytest.fixture
def fake_extractor():
    return FakeExtractor()


@pytest.fixture
def fake_client(app, fake_extractor):
    """Client whose extraction engine is swapped for FakeExtractor"""
    app.dependency_overrides[get_text_extractor] = lambda: fake_extractor
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(app):
    app.dependency_overrides[get_text_extractor] = lambda: FakeExtractor(
        error=ExtractionFailedError("Invalid PDF structure")
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
