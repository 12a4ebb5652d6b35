"""API response models."""

from pydantic import BaseModel
from typing import Literal

from svg_inspector.validators.models import ValidationError


class ValidationResponse(BaseModel):
    """Verdict for one document."""

    is_valid: bool
    errors: list[str] = []
    issues: list[ValidationError] = []
    summary: dict[str, int] = {}
    duration_ms: float


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    known_elements: int
    schema_problems: list[str] = []
