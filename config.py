"""
Configuration for the PDF text extractor service and CLI.

All values come from environment variables so the same code runs locally,
in a container, or behind a platform that injects PORT.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


# Paste a Base64-encoded PDF here to run the CLI with --use-inline-b64 and no
# other input. Leave it empty when not used; INLINE_BASE64 in the environment
# takes precedence.
INLINE_BASE64 = ""

DEFAULT_PORT = 3000
DEFAULT_MAX_BODY_BYTES = 50 * 1024 * 1024  # 50 MB, large Base64 payloads


class ConfigurationError(ValueError):
    """An environment variable holds a value the service cannot use."""


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    pdf_engine: str = "pymupdf"
    inline_base64: str = INLINE_BASE64
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            port=_int_env("PORT", DEFAULT_PORT),
            host=os.environ.get("HOST", "0.0.0.0"),
            max_body_bytes=_int_env("MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
            pdf_engine=os.environ.get("PDF_ENGINE", "pymupdf").strip().lower(),
            inline_base64=os.environ.get("INLINE_BASE64", INLINE_BASE64),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            log_file=os.environ.get("LOG_FILE") or None,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings singleton, read from the environment on first use."""
    return Settings.from_env()
