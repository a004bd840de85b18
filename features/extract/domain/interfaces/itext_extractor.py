"""
Interface for turning raw PDF bytes into plain text.

Infrastructure adapters (PyMuPDFTextExtractor, PdfplumberTextExtractor)
implement this interface.
"""

from abc import ABC, abstractmethod


class ITextExtractor(ABC):
    """Port for the external PDF parsing capability."""

    #: Name used by the PDF_ENGINE setting.
    engine: str = ""

    @abstractmethod
    def extract_text(self, data: bytes) -> str:
        """
        Extract the plain text of a PDF held in memory.

        Any resource opened by the parsing library must be released before
        returning, whether extraction succeeds or fails.

        Args:
            data: Raw PDF bytes. Not pre-validated; malformed documents are
                rejected by the library.

        Returns:
            Extracted text, trimmed of leading/trailing whitespace.

        Raises:
            ExtractionFailedError: the library could not parse the document.
        """
        raise NotImplementedError
