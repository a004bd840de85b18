"""
DTOs (Data Transfer Objects) used by the text extraction use cases, the CLI
and the HTTP API.
"""

from .extract_text_request_dto import ExtractTextRequestDTO
from .extract_base64_request_dto import ExtractBase64RequestDTO
from .extract_text_response_dto import ExtractTextResponseDTO

__all__ = [
    "ExtractTextRequestDTO",
    "ExtractBase64RequestDTO",
    "ExtractTextResponseDTO",
]
