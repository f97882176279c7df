"""
FastAPI application for the Price Lookup API.

Routers only handle HTTP concerns; the lookup itself is done by the price
comparison service, which receives the settings explicitly.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings
from app.logger_config import configure_logging, get_logger
from app.services.price_comparison_service import PriceSearchService
from app.routers import search, health


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles service initialization on startup and cleanup on shutdown.
    """
    # Startup
    logger.info("Initializing Price Search Service...")
    await app.state.price_service.initialize()
    logger.info("Service initialized." if app.state.price_service.is_ready() else "Service started without credentials.")
    yield

    # Shutdown
    logger.info("Application shutting down.")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        detail = f"{location}: {errors[0].get('msg')}" if location else errors[0].get("msg")
    else:
        detail = "malformed body"
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {detail}"})


def create_app(
    settings: Optional[Settings] = None,
    price_service: Optional[PriceSearchService] = None,
) -> FastAPI:
    """Create the FastAPI app; settings are read from the environment if not given."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.API_TITLE,
        version=__version__,
        lifespan=lifespan,
        description=settings.API_DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.settings = settings
    app.state.price_service = price_service or PriceSearchService(settings)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"]
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    app.include_router(search.router)
    app.include_router(health.router)

    return app


app = create_app()
