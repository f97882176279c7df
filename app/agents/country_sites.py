"""
Country configuration: which sites to search and which currency to expect.
"""

from typing import Dict, List, Optional

from app.models import CountryProfile


DEFAULT_COUNTRY = "US"

# Order matters: it is the order listed in "unsupported country" errors.
COUNTRY_PROFILES: Dict[str, CountryProfile] = {
    "US": CountryProfile(
        code="US",
        display_name="United States",
        currency_code="USD",
        domains=("amazon.com", "ebay.com", "walmart.com"),
    ),
    "IN": CountryProfile(
        code="IN",
        display_name="India",
        currency_code="INR",
        domains=("amazon.in", "flipkart.com"),
    ),
    "UK": CountryProfile(
        code="UK",
        display_name="United Kingdom",
        currency_code="GBP",
        domains=("amazon.co.uk", "ebay.co.uk", "argos.co.uk"),
    ),
    "CA": CountryProfile(
        code="CA",
        display_name="Canada",
        currency_code="CAD",
        domains=("amazon.ca", "ebay.ca", "walmart.ca"),
    ),
    "AU": CountryProfile(
        code="AU",
        display_name="Australia",
        currency_code="AUD",
        domains=("amazon.com.au", "ebay.com.au", "catch.com.au"),
    ),
}


def resolve_country(code: Optional[str]) -> CountryProfile:
    """
    Get the profile for a country code, falling back to the US profile.

    Args:
        code: Country code in any case, or None

    Returns:
        The matching CountryProfile, or the default profile if the code is
        missing or unknown
    """
    if code:
        profile = COUNTRY_PROFILES.get(code.upper())
        if profile is not None:
            return profile
    return COUNTRY_PROFILES[DEFAULT_COUNTRY]


def is_supported_country(code: str) -> bool:
    """Check whether an explicitly supplied country code is in the table."""
    return code.upper() in COUNTRY_PROFILES


def list_supported_countries() -> List[str]:
    """
    Get list of all supported country codes.

    Returns:
        List of supported country codes, in table order
    """
    return list(COUNTRY_PROFILES.keys())


def get_country_profiles() -> List[CountryProfile]:
    return list(COUNTRY_PROFILES.values())
