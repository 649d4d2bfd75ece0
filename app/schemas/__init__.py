"""Pydantic schemas for API request/response validation."""

from app.schemas.conversion import ConversionRequest, HealthResponse

__all__ = [
    "ConversionRequest",
    "HealthResponse",
]
