"""
Domain interfaces (ports) for the PDF text extraction feature.

- Domain defines interfaces (ports)
- Infrastructure implements interfaces (adapters)
- Application orchestrates via interfaces
"""

from .itext_extractor import ITextExtractor

__all__ = ["ITextExtractor"]
