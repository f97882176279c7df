"""Tests for the country resolver."""

import pytest

from app.agents.country_sites import (
    COUNTRY_PROFILES,
    get_country_profiles,
    is_supported_country,
    list_supported_countries,
    resolve_country,
)


class TestResolveCountry:
    """Tests for the lenient resolver."""

    @pytest.mark.parametrize("code", ["US", "IN", "UK", "CA", "AU"])
    def test_supported_codes_resolve_to_their_profile(self, code):
        assert resolve_country(code).code == code

    @pytest.mark.parametrize("code", ["us", "In", "uk"])
    def test_codes_are_case_insensitive(self, code):
        assert resolve_country(code).code == code.upper()

    @pytest.mark.parametrize("code", [None, "", "INVALID", "GB", "U"])
    def test_unknown_or_missing_code_falls_back_to_us(self, code):
        profile = resolve_country(code)
        assert profile.code == "US"
        assert profile.currency_code == "USD"

    def test_us_profile_searches_major_retailers(self):
        profile = resolve_country("US")
        assert profile.display_name == "United States"
        assert profile.domains == ("amazon.com", "ebay.com", "walmart.com")

    def test_profiles_are_immutable(self):
        profile = resolve_country("IN")
        with pytest.raises(Exception):
            profile.currency_code = "USD"
        assert COUNTRY_PROFILES["IN"].currency_code == "INR"


class TestSupportedCountries:
    """Tests for the strict check and the table listing."""

    def test_supported_list_keeps_table_order(self):
        assert list_supported_countries() == ["US", "IN", "UK", "CA", "AU"]

    def test_is_supported_country(self):
        assert is_supported_country("ca")
        assert not is_supported_country("INVALID")
        assert not is_supported_country("")

    def test_get_country_profiles_returns_full_table(self):
        profiles = get_country_profiles()
        assert [p.code for p in profiles] == list_supported_countries()
        assert {p.currency_code for p in profiles} == {"USD", "INR", "GBP", "CAD", "AUD"}
