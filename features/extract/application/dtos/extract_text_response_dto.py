"""
DTO for extracted text.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractTextResponseDTO:
    """Output of both extraction use cases: trimmed text and its character count."""

    text: str
    length: int

    @classmethod
    def from_text(cls, text: str) -> "ExtractTextResponseDTO":
        return cls(text=text, length=len(text))
