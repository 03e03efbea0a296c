"""
API route handlers.
The digest endpoint is served under /api.
"""
import logging
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response
from pydantic import ValidationError
from typing import Any, Dict, Optional

from trend_digest.config.settings import settings
from trend_digest.core.trend_digest import generate_trend_digest
from trend_digest.schemas.models import DigestRequest, DigestResponse, ErrorResponse
from trend_digest.utils.errors import handle_error

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid input"},
    500: {"model": ErrorResponse, "description": "Configuration or YouTube API failure"},
}


def digest_query_params(
    brand: str = Query("", description="Brand to search for"),
    campaign: str = Query("", description="Campaign name"),
    summary: str = Query("", description="Comma-separated keywords"),
    country: str = Query(settings.YOUTUBE_DEFAULT_COUNTRY, description="Region code"),
    max_results: int = Query(
        settings.YOUTUBE_DEFAULT_MAX_RESULTS,
        alias="max",
        ge=1,
        le=settings.YOUTUBE_MAX_RESULTS_LIMIT,
        description="Maximum number of videos to sample",
    ),
) -> Dict[str, Any]:
    """
    Collect the digest parameters from the query string.

    Besides a missing brand, a non-integer or out-of-range ``max`` (outside
    1..50, the YouTube maxResults bounds) is also a client error: FastAPI
    rejects it with 400 before YouTube is called.
    """
    return {
        "brand": brand,
        "campaign": campaign,
        "summary": summary,
        "country": country,
        "max": max_results,
    }


def _apply_digest_headers(response: Response) -> None:
    for name, value in settings.cors_headers.items():
        response.headers[name] = value
    response.headers["Cache-Control"] = settings.CACHE_CONTROL


def _run_digest(params: Dict[str, Any], response: Response) -> Dict[str, Any]:
    _apply_digest_headers(response)

    try:
        settings.validate()
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    try:
        request = DigestRequest.model_validate(params)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid parameters: {e.errors()[0]['msg']}")

    if not request.brand:
        raise HTTPException(status_code=400, detail="brand query param required")

    try:
        return generate_trend_digest(request)
    except HTTPException:
        raise
    except Exception as e:
        raise handle_error(e)


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "service": settings.APP_NAME
    }


@router.get("/trends", response_model=DigestResponse, responses=ERROR_RESPONSES)
def get_trend_digest(
    response: Response,
    params: Dict[str, Any] = Depends(digest_query_params),
) -> Dict[str, Any]:
    """
    Build a trend digest for a brand/campaign.

    Searches YouTube, ranks hashtags and publish hours from the sampled videos
    and returns copy and hashtags for both channels.
    """
    return _run_digest(params, response)


@router.post("/trends", response_model=DigestResponse, responses=ERROR_RESPONSES)
def post_trend_digest(
    response: Response,
    params: Dict[str, Any] = Depends(digest_query_params),
    body: Optional[Dict[str, Any]] = Body(None),
) -> Dict[str, Any]:
    """Same as GET; fields in a JSON body override the query string."""
    if body:
        params = {**params, **body}
    return _run_digest(params, response)


def preflight_response() -> Response:
    """CORS preflight - answered with 204 and no body."""
    return Response(status_code=204, headers=settings.cors_headers)
