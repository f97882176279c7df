#!/usr/bin/env python3
"""
Main entry point for the Price Lookup API.

Usage:
    python main.py

Requirements:
    1. pip install -e .
    2. Set environment variables (see .env.example)
"""

import sys

from app.config import Settings
from app.exceptions import ConfigurationError
from app.logger_config import configure_logging, get_logger


logger = get_logger("main")


def main():
    """Main entry point for the application."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    # Requests are answered with a configuration error until the key is set
    try:
        settings.validate_required_vars()
    except ConfigurationError as e:
        logger.warning(f"{e.message}: {', '.join(e.missing)}")
        logger.warning("Please check the .env.example file for required environment variables.")

    try:
        import uvicorn

        logger.info("Starting Price Lookup API...")
        logger.info(f"API will be available at: http://localhost:{settings.port}/api/price")
        logger.info(f"API documentation at: http://localhost:{settings.port}/docs")

        uvicorn.run(
            "app.main:app",
            host=settings.host,
            port=settings.port,
            reload=True,
            log_level=settings.log_level.lower()
        )
    except Exception as e:
        logger.error(f"Failed to start application: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
