"""
FastAPI routes for the PDF text extraction feature.

Feature: synchronous "Base64 PDF in, plain text out" over HTTP.
Callers (e.g. workflow engines) POST the document as Base64 in a JSON or
url-encoded body; the field name is sniffed from a fixed list.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional
from urllib.parse import parse_qs

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from config import Settings
from features.extract.application.dtos import ExtractBase64RequestDTO, ExtractTextResponseDTO
from features.extract.application.use_cases import ExtractBase64UseCase, build_text_extractor
from features.extract.domain.errors import (
    DEFAULT_EXTRACTION_ERROR,
    BodyTooLargeError,
    EngineUnavailableError,
    MissingRequestFieldError,
    PdfExtractorError,
)
from features.extract.domain.interfaces import ITextExtractor

logger = logging.getLogger(__name__)


router = APIRouter(tags=["extract"])


# Checked in this order; the first non-empty string wins.
BASE64_FIELDS = ("base64", "data", "pdf", "content")


class ExtractResponse(BaseModel):
    success: bool = True
    text: str
    length: int


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class InvalidRequestBodyError(PdfExtractorError):
    """Body is neither a JSON object nor url-encoded form data."""


def pick_base64_payload(body: Mapping[str, Any]) -> Optional[str]:
    """
    Return the Base64 payload from the first recognized field, or None.

    Empty strings and non-string values count as absent.
    """
    for field in BASE64_FIELDS:
        value = body.get(field)
        if isinstance(value, str) and value:
            return value
    return None


def parse_request_body(raw: bytes, content_type: str) -> Mapping[str, Any]:
    """
    Decode a JSON or url-encoded body into a mapping.

    Bodies of any other content type are treated as empty.
    """
    media_type = content_type.split(";", 1)[0].strip().lower()

    if media_type == "application/x-www-form-urlencoded":
        try:
            form = parse_qs(raw.decode("utf-8"), keep_blank_values=True)
        except UnicodeDecodeError as e:
            raise InvalidRequestBodyError(f"Invalid url-encoded body: {e}") from e
        return {key: values[0] for key, values in form.items()}

    if media_type and not media_type.endswith("json"):
        return {}
    if not raw.strip():
        return {}

    try:
        body = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise InvalidRequestBodyError(f"Invalid JSON body: {e}") from e
    if not isinstance(body, dict):
        raise InvalidRequestBodyError("JSON body must be an object")
    return body


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def extractor_error_handler(request: Request, exc: PdfExtractorError) -> JSONResponse:
    """Envelope for feature errors raised outside a route body (e.g. in dependencies)."""
    return error_response(500, str(exc) or DEFAULT_EXTRACTION_ERROR)


def get_settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


def get_text_extractor(request: Request) -> ITextExtractor:
    """
    One extractor per application, built on first use.

    Raises:
        EngineUnavailableError: unknown PDF_ENGINE or engine library missing.
    """
    extractor = getattr(request.app.state, "text_extractor", None)
    if extractor is None:
        engine = request.app.state.settings.pdf_engine
        try:
            extractor = build_text_extractor(engine)
        except (ImportError, ValueError) as e:
            logger.error("Could not load PDF engine %r: %s", engine, e)
            raise EngineUnavailableError(f"PDF engine {engine!r} is unavailable: {e}") from e
        request.app.state.text_extractor = extractor
    return extractor


def build_extract_base64_use_case(extractor: ITextExtractor) -> ExtractBase64UseCase:
    return ExtractBase64UseCase(extractor=extractor)


@router.post(
    "/extract",
    response_model=ExtractResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def extract_text(
    request: Request,
    settings: Settings = Depends(get_settings_from_app),
    extractor: ITextExtractor = Depends(get_text_extractor),
):
    """
    Extract plain text from a Base64-encoded PDF.

    The payload is read from "base64", "data", "pdf" or "content", in that
    order. Extraction runs in the threadpool so the event loop stays free.
    """
    raw = await request.body()
    if len(raw) > settings.max_body_bytes:
        return error_response(413, str(BodyTooLargeError(settings.max_body_bytes)))

    try:
        body = parse_request_body(raw, request.headers.get("content-type", ""))
    except InvalidRequestBodyError as e:
        return error_response(400, str(e))

    base64_payload = pick_base64_payload(body)
    if not base64_payload:
        return error_response(400, str(MissingRequestFieldError(BASE64_FIELDS)))

    logger.info("Received base64 PDF data, length: %d", len(base64_payload))

    use_case = build_extract_base64_use_case(extractor)
    dto_in = ExtractBase64RequestDTO(base64=base64_payload)

    try:
        dto_out: ExtractTextResponseDTO = await run_in_threadpool(use_case.execute, dto_in)
    except PdfExtractorError as e:
        logger.error("Error extracting PDF text: %s", e)
        return error_response(500, str(e))
    except Exception as e:
        logger.exception("Unexpected error extracting PDF text")
        return error_response(500, str(e) or DEFAULT_EXTRACTION_ERROR)

    logger.info("Extracted text length: %d", dto_out.length)

    return ExtractResponse(text=dto_out.text, length=dto_out.length)
