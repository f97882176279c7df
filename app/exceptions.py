"""
Error types raised by the price lookup application.
"""

from typing import List, Sequence


class PriceComparisonError(Exception):
    """Base class for errors that map onto an HTTP error response."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(PriceComparisonError):
    """Raised when a required credential is not configured."""

    status_code = 500

    def __init__(self, missing: Sequence[str] = ()):
        super().__init__("Missing required environment variables")
        self.missing: List[str] = list(missing)


class UnsupportedCountryError(PriceComparisonError):
    """Raised when the caller names a country outside the supported set."""

    status_code = 400

    def __init__(self, code: str, supported: Sequence[str]):
        super().__init__(
            f"Unsupported country: {code}. Supported countries: {', '.join(supported)}"
        )
        self.code = code
        self.supported = list(supported)


class EmptyDiscoveryError(Exception):
    """Raised when the web search stage returns no text."""
