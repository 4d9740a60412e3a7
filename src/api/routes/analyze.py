"""Analysis API endpoint."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from analyzers import run_seo_analysis
from api.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from fetcher import fetch_html

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"])


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Analyze a page",
    description="Fetch a page and score its SEO meta tags.",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
        502: {"model": ErrorResponse, "description": "Upstream refused or failed"},
        504: {"model": ErrorResponse, "description": "Upstream timed out"},
    },
)
async def analyze(
    body: AnalyzeRequest, request: Request
) -> AnalyzeResponse | JSONResponse:
    """
    Fetch the page at ``body.url`` and analyze its tags.

    Fetch failures raise ``FetchError`` and are turned into error records by
    the application-level handler, so the analyzer only ever sees HTML.
    """
    url = (body.url or "").strip()
    if not url:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error="URL is required").model_dump(exclude_none=True),
        )

    client = getattr(request.app.state, "http_client", None)
    html = await fetch_html(url, client=client)

    result = run_seo_analysis(html, url)
    logger.info(f"Analyzed {url}: score {result.score}/{result.max_score}")

    return AnalyzeResponse.from_result(result)
