"""
Pydantic models and data structures for the price lookup application.
"""

from typing import TypedDict, List, Optional, Dict, Any, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class CountryProfile(BaseModel):
    """Static record mapping a country code to its name, currency and trusted sites."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=2, max_length=2)
    display_name: str
    currency_code: str = Field(..., min_length=3, max_length=3)
    domains: Tuple[str, ...]


class PriceSearchRequest(BaseModel):
    """Request model for a price lookup."""
    query: str = Field(..., min_length=1)
    country: Optional[str] = None


class PriceRecord(BaseModel):
    """A single product listing with its price.

    Values are kept exactly as the extraction tool returned them (an integer
    price stays an integer); the tool schema is the only validation applied.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    link: Any = None
    price: Union[int, float, Any] = None
    currency: Any = None
    product_name: Any = Field(None, alias="productName")


class SearchResult(BaseModel):
    """Response model for a price lookup."""
    model_config = ConfigDict(populate_by_name=True)

    country: str
    country_code: str = Field(..., alias="countryCode")
    currency: str
    results: List[PriceRecord] = []


class ErrorResponse(BaseModel):
    """Body returned for every error response."""
    error: str


class DiscoveryOutput(BaseModel):
    """Output of the web search stage, consumed by the extraction stage."""
    query: str
    search_input: str
    text: str


class GraphState(TypedDict):
    """State object for the LangGraph workflow."""
    query: str
    profile: CountryProfile
    discovery: Optional[DiscoveryOutput]
    extracted: List[Dict[str, Any]]
    results: List[PriceRecord]
