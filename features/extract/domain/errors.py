"""
Error taxonomy for the PDF text extraction feature.

Delivery adapters catch PdfExtractorError to tell the feature's own failures
apart from unexpected ones.
"""

DEFAULT_EXTRACTION_ERROR = "Failed to extract text from PDF"


class PdfExtractorError(Exception):
    """Base class for every failure raised by this feature."""


class InvalidArgumentsError(PdfExtractorError):
    """Unrecognized flag, duplicated positional, or a flag missing its value."""


class NoInputProvidedError(PdfExtractorError):
    def __init__(self, message: str = (
        "Provide a PDF file path, --input-b64 <BASE64>, "
        "--input-b64-file <path>, or --use-inline-b64."
    )):
        super().__init__(message)


class EmptyInlineConstantError(PdfExtractorError):
    def __init__(self, message: str = (
        "INLINE_BASE64 is empty. Paste your Base64 PDF string into the "
        "configuration or omit --use-inline-b64."
    )):
        super().__init__(message)


class PdfFileNotFoundError(PdfExtractorError, FileNotFoundError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"PDF file not found at {path}")


class NotAFileError(PdfExtractorError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The provided path is not a file: {path}")


class ExtractionFailedError(PdfExtractorError):
    """The parsing library (or Base64 decoding) rejected the document."""

    def __init__(self, reason: str = ""):
        self.reason = reason or DEFAULT_EXTRACTION_ERROR
        super().__init__(self.reason)


class MissingDependencyError(PdfExtractorError):
    def __init__(self, package: str, install_hint: str):
        self.package = package
        self.install_hint = install_hint
        super().__init__(f"Missing dependency: {package}")


class MissingRequestFieldError(PdfExtractorError):
    def __init__(self, fields):
        self.fields = tuple(fields)
        quoted = ", ".join(f'"{name}"' for name in self.fields[:-1])
        super().__init__(
            "Missing base64 data. Please provide base64 in the request body as "
            f'{quoted}, or "{self.fields[-1]}"'
        )


class BodyTooLargeError(PdfExtractorError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Request body exceeds the {limit} byte limit")


class EngineUnavailableError(PdfExtractorError):
    """The configured PDF engine is unknown or its library is not installed."""
