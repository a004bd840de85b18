"""
DTO for extraction from any supported input source (CLI path).
"""

from dataclasses import dataclass

from features.extract.domain.entities import InputSpec


@dataclass
class ExtractTextRequestDTO:
    """Input for ExtractTextUseCase."""

    input_spec: InputSpec
