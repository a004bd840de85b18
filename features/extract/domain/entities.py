"""
Domain entities for the PDF text extraction feature.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InputSpec:
    """
    Where the PDF bytes come from for one invocation.

    Several sources may be set at once; the resolver uses only the
    highest-precedence one:
    pdf_path > input_b64_file > input_b64 > use_inline_b64.
    """

    pdf_path: Optional[str] = None
    input_b64: Optional[str] = None
    input_b64_file: Optional[str] = None
    use_inline_b64: bool = False

    def has_any_source(self) -> bool:
        return bool(
            self.pdf_path or self.input_b64_file or self.input_b64 or self.use_inline_b64
        )
