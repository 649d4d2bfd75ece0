"""Pydantic schemas for the conversion API."""

from pydantic import BaseModel, ConfigDict, Field


class ConversionRequest(BaseModel):
    """Request model for the SBV to VTT conversion endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    sbv_text: str | None = Field(
        None, alias="sbvText", description="Raw SBV subtitle document to convert"
    )
    italics_text: str | None = Field(
        None,
        alias="italicsText",
        description="Phrases to italicize, one per line. Blank lines are ignored.",
    )
    output_name: str | None = Field(
        None,
        alias="outputName",
        description="Download file name; sanitized and given a .vtt suffix",
    )


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    service: str
    status: str
    version: str
    authentication: str
    endpoints: dict[str, list[str]]
