"""
Configuration settings for the price lookup application.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from app.exceptions import ConfigurationError


class Settings:
    """Application settings and configuration.

    Built once at process start (see ``Settings.from_env``) and passed
    explicitly to the request handler and the price search service.
    """

    # API Configuration
    API_TITLE: str = "Price Lookup API"
    API_DESCRIPTION: str = "Finds the lowest online prices for a product on regional e-commerce sites."

    def __init__(
        self,
        openai_api_key: Optional[str] = None,
        openai_model: str = "gpt-4o-mini",
        openai_temperature: float = 0.0,
        log_level: str = "INFO",
        host: str = "0.0.0.0",
        port: int = 7777,
    ):
        self.openai_api_key = openai_api_key
        self.openai_model = openai_model
        self.openai_temperature = openai_temperature
        self.log_level = log_level
        self.host = host
        self.port = port

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the process environment (and a .env file if present)."""
        load_dotenv()
        return cls(
            openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
            openai_model=os.environ.get("OPENAI_MODEL", "gpt-4o-mini"),
            openai_temperature=float(os.environ.get("OPENAI_TEMPERATURE", "0")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", "7777")),
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.openai_api_key)

    def validate_required_vars(self):
        """Validate that all required environment variables are set."""
        missing = []

        if not self.openai_api_key:
            missing.append("OPENAI_API_KEY")

        if missing:
            raise ConfigurationError(missing)
