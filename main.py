"""
Entry point for the FastAPI application.

Run with (from project root):

    python main.py

or

    uvicorn main:app --port 3000

Exposes:

    GET  /health
    GET  /
    POST /extract
"""

import logging
import sys
from typing import Optional

from fastapi import FastAPI, Request
from pydantic import BaseModel

from config import Settings, get_settings
from features.extract.domain.errors import BodyTooLargeError, PdfExtractorError
from features.extract.presentation.api import (
    error_response,
    extractor_error_handler,
    router as extract_router,
)

SERVICE_NAME = "PDF Text Extractor"
SERVICE_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


class HealthResponse(BaseModel):
    status: str
    message: str


SERVICE_DESCRIPTION = {
    "service": SERVICE_NAME,
    "version": SERVICE_VERSION,
    "endpoints": {
        "health": "GET /health",
        "extract": "POST /extract",
        "description": "Send POST request to /extract with base64 PDF data in the body",
    },
    "example": {
        "method": "POST",
        "url": "/extract",
        "body": {
            "base64": "JVBERi0xLjQK...",
        },
    },
}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION)
    app.state.settings = settings

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        # Chunked bodies carry no Content-Length; the route re-checks after reading.
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > settings.max_body_bytes:
            logger.warning("Rejected request body of %s bytes", content_length)
            return error_response(413, str(BodyTooLargeError(settings.max_body_bytes)))
        return await call_next(request)

    app.add_exception_handler(PdfExtractorError, extractor_error_handler)
    app.include_router(extract_router)

    @app.get("/health", response_model=HealthResponse)
    def health_check() -> HealthResponse:
        return HealthResponse(status="ok", message="PDF Extractor Service is running")

    @app.get("/")
    def service_description() -> dict:
        return SERVICE_DESCRIPTION

    return app


configure_logging(get_settings())
logger.info("Starting PDF Text Extractor API")

app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    logger.info("PDF Extractor Service is running on port %d", settings.port)
    logger.info("Health check: http://localhost:%d/health", settings.port)
    logger.info("Extract endpoint: POST http://localhost:%d/extract", settings.port)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
