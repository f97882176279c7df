"""
Health check and metadata API router.
"""

from typing import Dict, Any, List

from fastapi import APIRouter, Request

from app import __version__
from app.agents.country_sites import get_country_profiles, list_supported_countries


router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request) -> Dict[str, Any]:
    """
    Health check endpoint.

    Returns:
        Dictionary with health status and version information
    """
    return request.app.state.price_service.get_health_status()


@router.get("/countries")
async def countries() -> List[Dict[str, Any]]:
    """List the supported countries with their currency and searched sites."""
    return [
        {
            "code": profile.code,
            "country": profile.display_name,
            "currency": profile.currency_code,
            "domains": list(profile.domains),
        }
        for profile in get_country_profiles()
    ]


@router.get("/")
async def root(request: Request) -> Dict[str, Any]:
    """
    Root endpoint with API information.

    Returns:
        Dictionary with API metadata and available endpoints
    """
    return {
        "title": request.app.title,
        "version": __version__,
        "description": request.app.description,
        "endpoints": {
            "price": "/api/price",
            "countries": "/countries",
            "health": "/health",
            "docs": "/docs",
            "redoc": "/redoc"
        },
        "supported_countries": list_supported_countries(),
    }
