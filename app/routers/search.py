"""
Price API router - handles the price lookup endpoint.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.exceptions import PriceComparisonError
from app.logger_config import get_logger
from app.models import ErrorResponse, PriceSearchRequest, SearchResult
from app.services.price_comparison_service import compare_prices


logger = get_logger(__name__)

router = APIRouter(prefix="/api/price", tags=["price"])


@router.post(
    "",
    response_model=SearchResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_prices(body: PriceSearchRequest, request: Request):
    """
    Find the lowest online prices for a product in a country.

    1. Credential check
    2. Country validation and resolution
    3. Web search + structured extraction
    4. Price-based sorting

    Args:
        body: Query and optional country code (US, IN, UK, CA, AU)

    Returns:
        SearchResult with results sorted by price ascending, or an error body
    """
    try:
        return await compare_prices(
            body,
            request.app.state.settings,
            request.app.state.price_service,
        )
    except PriceComparisonError as e:
        logger.warning(f"Price lookup rejected: {e.message}")
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    except Exception:
        logger.exception("Price comparison error")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch prices"})
