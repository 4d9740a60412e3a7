"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, ConfigDict, Field

from analyzers.base import MAX_SCORE, AnalysisResult, TagStatus


# =============================================================================
# Request Schemas (what clients send to us)
# =============================================================================


class AnalyzeRequest(BaseModel):
    """Request body for analyzing a page."""

    url: str | None = Field(
        default=None,
        description="The URL of the page to analyze",
        examples=["https://example.com"],
    )


# =============================================================================
# Response Schemas (what we send back to clients)
# =============================================================================


class TagFindingResponse(BaseModel):
    """Response schema for a single tag finding."""

    model_config = ConfigDict(from_attributes=True)

    tag: str
    status: TagStatus
    value: str | None


class PreviewResponse(BaseModel):
    """Response schema for the search/social preview projection."""

    model_config = ConfigDict(from_attributes=True)

    title: str | None = None
    description: str | None = None
    image: str | None = None


class AnalyzeResponse(BaseModel):
    """Response schema for a completed analysis."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    url: str
    score: int = Field(ge=0, le=MAX_SCORE)
    max_score: int = Field(default=MAX_SCORE, alias="maxScore")
    results: list[TagFindingResponse]
    preview: PreviewResponse

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalyzeResponse":
        return cls.model_validate(result.to_dict())


# =============================================================================
# Errors
# =============================================================================


class ErrorResponse(BaseModel):
    """Error record returned for any failed request."""

    error: str
    details: str | None = None
    code: str | None = None


# =============================================================================
# Health Check
# =============================================================================


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "healthy"
    service: str
    version: str
