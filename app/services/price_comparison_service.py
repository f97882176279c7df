"""
Price comparison service - main business logic orchestrator.
"""

from typing import Any, Dict, List, Optional

from langchain_core.runnables import Runnable

from app import __version__
from app.config import Settings
from app.exceptions import EmptyDiscoveryError, UnsupportedCountryError
from app.logger_config import get_logger
from app.models import CountryProfile, GraphState, PriceRecord, PriceSearchRequest, SearchResult
from app.agents.country_sites import is_supported_country, list_supported_countries, resolve_country
from app.agents.llm_agents import build_extraction_llm, build_search_llm
from app.core.workflow import create_workflow


logger = get_logger(__name__)


class PriceSearchService:
    """
    Runs the two-stage price search for one query and country.

    The LLM runnables are built from the settings on first use unless they are
    passed in directly.
    """

    def __init__(
        self,
        settings: Settings,
        search_llm: Optional[Runnable] = None,
        extraction_llm: Optional[Runnable] = None,
    ):
        self.settings = settings
        self._search_llm = search_llm
        self._extraction_llm = extraction_llm
        self._workflow = None

    @property
    def initialized(self) -> bool:
        return self._workflow is not None

    def is_ready(self) -> bool:
        """Check if the service is ready to handle requests."""
        return self.initialized and self.settings.has_credentials

    async def initialize(self):
        """Build the LLM runnables and compile the workflow."""
        if self._workflow is not None:
            return
        if self._search_llm is None or self._extraction_llm is None:
            if not self.settings.has_credentials:
                logger.warning("OPENAI_API_KEY not set; price search workflow not built.")
                return
            self._search_llm = self._search_llm or build_search_llm(self.settings)
            self._extraction_llm = self._extraction_llm or build_extraction_llm(self.settings)
        self._workflow = create_workflow(self._search_llm, self._extraction_llm)

    async def search(self, query: str, profile: CountryProfile) -> List[PriceRecord]:
        """
        Search for prices of a product on the country's sites.

        Never raises: every failure of the external service ends up as an
        empty list.

        Args:
            query: Product query as typed by the user
            profile: Resolved country profile

        Returns:
            List of PriceRecord objects, possibly empty, in extraction order
        """
        try:
            await self.initialize()
            if self._workflow is None:
                raise RuntimeError("Price search workflow is not initialized.")

            initial_state = GraphState(
                query=query,
                profile=profile,
                discovery=None,
                extracted=[],
                results=[],
            )
            final_state = await self._workflow.ainvoke(initial_state)
        except EmptyDiscoveryError as e:
            logger.warning(f"❌ Web search returned nothing for '{query}': {e}")
            return []
        except Exception:
            logger.exception(f"❌ Price search failed for '{query}'")
            return []

        results = final_state.get("results", [])
        if not results:
            logger.info(f"No matching listings found for '{query}'")
        return results

    def get_health_status(self) -> Dict[str, Any]:
        """
        Get service health status.

        Returns:
            Dictionary with health information
        """
        return {
            "status": "healthy" if self.is_ready() else "not_ready",
            "version": __version__,
            "initialized": self.initialized,
            "workflow_ready": self._workflow is not None,
            "credentials_configured": self.settings.has_credentials,
        }


def _price_key(record: PriceRecord):
    price = record.price
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return (1, 0)
    return (0, price)


def sort_by_price(records: List[PriceRecord]) -> List[PriceRecord]:
    """
    Sort records by ascending price; records with equal prices keep their order.

    Records without a numeric price go last, in their original order.
    """
    return sorted(records, key=_price_key)


async def compare_prices(
    request: PriceSearchRequest,
    settings: Settings,
    service: PriceSearchService,
) -> SearchResult:
    """
    Handle one price lookup request.

    Args:
        request: Query and optional country code
        settings: Application settings
        service: Price search service to run the lookup with

    Returns:
        SearchResult with records sorted by price ascending

    Raises:
        ConfigurationError: If the OpenAI credential is missing
        UnsupportedCountryError: If an explicit country code is not supported
    """
    settings.validate_required_vars()

    if request.country and not is_supported_country(request.country):
        raise UnsupportedCountryError(request.country, list_supported_countries())

    profile = resolve_country(request.country)
    logger.info(f"Searching for \"{request.query}\" in {profile.display_name} ({profile.code})")

    records = await service.search(request.query, profile)

    return SearchResult(
        country=profile.display_name,
        country_code=profile.code,
        currency=profile.currency_code,
        results=sort_by_price(records),
    )
