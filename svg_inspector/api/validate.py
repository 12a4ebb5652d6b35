"""Validation API — run the validation engine over a submitted document."""

import time

from fastapi import APIRouter

import structlog

from svg_inspector.config import get_settings
from svg_inspector.models.requests import ValidateRequest
from svg_inspector.models.responses import ValidationResponse
from svg_inspector.validators import validation_engine

logger = structlog.get_logger()

router = APIRouter()


@router.post("/validate", response_model=ValidationResponse)
def validate_document(request: ValidateRequest):
    """Validate an SVG document and return every violation found."""
    settings = get_settings()

    size = len(request.svg.encode("utf-8"))
    if size > settings.MAX_DOCUMENT_BYTES:
        # Mapped to HTTP 422 by the ValueError handler in main
        raise ValueError(
            f"Document is {size} bytes; the limit is {settings.MAX_DOCUMENT_BYTES} bytes"
        )

    start = time.perf_counter()
    result = validation_engine.validate(request.svg)
    duration_ms = round((time.perf_counter() - start) * 1000, 2)

    logger.info(
        "validate_request_complete",
        is_valid=result.is_valid,
        total_errors=len(result.errors),
        size_bytes=size,
        duration_ms=duration_ms,
    )

    return ValidationResponse(
        is_valid=result.is_valid,
        errors=result.errors,
        issues=result.issues,
        summary=result.summary,
        duration_ms=duration_ms,
    )
