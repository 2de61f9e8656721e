"""Health check and configuration endpoints for API monitoring."""

from datetime import UTC, datetime

from fastapi import APIRouter

from caption_summarizer import __version__, get_settings
from routes.schema import ConfigurationResponse

router = APIRouter()


@router.get("/health")
async def health_check():
    settings = get_settings()
    return {
        "status": "healthy",
        "message": f"{settings.api_title} is running",
        "timestamp": datetime.now(UTC).isoformat(),
        "version": __version__,
        "environment": settings.to_public_config(),
    }


@router.get("/config", response_model=ConfigurationResponse)
async def get_configuration():
    settings = get_settings()
    return ConfigurationResponse(
        status="success",
        message="Configuration retrieved successfully",
        model=settings.gemini_summary_model,
        transcript_language=settings.transcript_language,
        gemini_configured=settings.has_gemini,
        version=__version__,
    )
