"""
DTO for extraction from a Base64 payload (HTTP path).
"""

from dataclasses import dataclass


@dataclass
class ExtractBase64RequestDTO:
    """Input for ExtractBase64UseCase."""

    base64: str
