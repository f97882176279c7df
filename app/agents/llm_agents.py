"""
LLM-based agents for web search discovery and structured price extraction.
"""

import json
from typing import Any, Dict, List

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI

from app.config import Settings
from app.exceptions import EmptyDiscoveryError
from app.logger_config import get_logger
from app.models import CountryProfile, DiscoveryOutput, PriceRecord


logger = get_logger(__name__)

EXTRACT_PRICES_TOOL_NAME = "extract_prices"

EXTRACT_PRICES_TOOL: Dict[str, Any] = {
    "type": "function",
    "function": {
        "name": EXTRACT_PRICES_TOOL_NAME,
        "description": "Extract price info from search results",
        "parameters": {
            "type": "object",
            "properties": {
                "results": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "link": {"type": "string"},
                            "price": {"type": "number"},
                            "currency": {"type": "string"},
                            "productName": {"type": "string"},
                        },
                        "required": ["link", "price", "currency", "productName"],
                    },
                }
            },
            "required": ["results"],
        },
    },
}


def build_search_llm(settings: Settings) -> Runnable:
    """Get the LLM used for the web search stage (Responses API + web search tool)."""
    llm = ChatOpenAI(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
        use_responses_api=True,
    )
    return llm.bind_tools([{"type": "web_search_preview"}])


def build_extraction_llm(settings: Settings) -> Runnable:
    """Get the LLM used for extraction, forced to call the extract_prices tool."""
    llm = ChatOpenAI(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
        temperature=settings.openai_temperature,
    )
    return llm.bind_tools([EXTRACT_PRICES_TOOL], tool_choice=EXTRACT_PRICES_TOOL_NAME)


def build_site_clause(domains) -> str:
    """Join domains into a disjunctive site restriction, e.g. 'site:a.com OR site:b.com'."""
    return " OR ".join(f"site:{domain}" for domain in domains)


def build_search_input(query: str, profile: CountryProfile) -> str:
    return f'Find prices for "{query}" on {build_site_clause(profile.domains)}'


def build_search_prompt(search_input: str, profile: CountryProfile) -> str:
    """
    Build the instruction sent to the web search stage.

    Args:
        search_input: The 'Find prices for ...' string with the site clause
        profile: Country the search is restricted to

    Returns:
        Prompt string
    """
    country_info = json.dumps({
        "country": profile.display_name,
        "currency": profile.currency_code,
        "domains": list(profile.domains),
    })

    return f"""You are a web search expert and shopping assistant helping users find the best online prices for specific products in a given country.

- Product to search: "{search_input}"
- Country info: {country_info}

Your task:
1. Use **broad web search** to find this product across **multiple trusted ecommerce platforms, local retailers, and brand websites** specific to the given country.
2. DO NOT rely only on Amazon or one source. Explore other **popular and regionally relevant** platforms for {profile.display_name}.
3. Match the product **exactly**, including brand, model, version, and storage/specs. Avoid similar or related variants.
4. Extract **only actual product page links** (not blog posts, search result pages, or generic category links).
5. Each listing must include clear pricing in the **local currency** ({profile.currency_code}), and be available for purchase from a **reputable seller**.

Return 5-10 results sorted by **ascending price**.
Each result should include:
- Product Name (as per listing)
- Price
- Currency
- Direct URL (fully qualified link to the exact product page)
- Seller or Website Name

Search results must be specific to {profile.display_name}. Accuracy and relevance are more important than quantity. Prioritize **trustworthiness, correct product match, and diverse sources across the web**."""


def build_extraction_messages(discovery: DiscoveryOutput) -> List[BaseMessage]:
    return [
        SystemMessage(
            content=(
                "You are a price comparison assistant. Match exactly and extract prices. "
                f"Input:\n\n{discovery.text}"
            )
        ),
        HumanMessage(content=discovery.search_input),
    ]


def message_text(message: BaseMessage) -> str:
    """Get the plain text of a chat message, joining text blocks if content is a list."""
    content = message.content
    if isinstance(content, str):
        return content

    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") in ("text", "output_text"):
            parts.append(block.get("text", ""))
    return "".join(parts)


async def discover_listings(llm: Runnable, query: str, profile: CountryProfile) -> DiscoveryOutput:
    """
    Agent: search the web for listings of the product on the country's sites.

    Args:
        llm: Search-capable LLM runnable
        query: Product query as typed by the user
        profile: Country to search in

    Returns:
        DiscoveryOutput with the raw answer text

    Raises:
        EmptyDiscoveryError: If the search returns no text
    """
    search_input = build_search_input(query, profile)
    prompt = build_search_prompt(search_input, profile)

    logger.info(f"🔍 Web search for '{query}' in {profile.display_name} ({profile.code})")
    response = await llm.ainvoke(prompt)
    text = message_text(response).strip()

    if not text:
        raise EmptyDiscoveryError("No search results received.")

    logger.debug(f"Web search response:\n{text}")
    return DiscoveryOutput(query=query, search_input=search_input, text=text)


async def extract_prices(llm: Runnable, discovery: DiscoveryOutput) -> List[Dict[str, Any]]:
    """
    Agent: turn the web search answer into raw price records via the forced tool call.

    Args:
        llm: LLM runnable bound to the extract_prices tool
        discovery: Output of the web search stage

    Returns:
        List of raw record dictionaries (empty if the model made no tool call)
    """
    response = await llm.ainvoke(build_extraction_messages(discovery))

    tool_calls = [
        call for call in getattr(response, "tool_calls", None) or []
        if call.get("name") == EXTRACT_PRICES_TOOL_NAME
    ]
    if not tool_calls:
        if getattr(response, "invalid_tool_calls", None):
            logger.warning("❌ Extraction tool call had unparseable arguments")
        else:
            logger.warning("❌ Extraction stage returned no tool call")
        return []

    args = tool_calls[0].get("args") or {}
    results = args.get("results") or []
    if not isinstance(results, list):
        logger.warning(f"❌ Extraction returned a non-list 'results' field: {type(results).__name__}")
        return []

    logger.info(f"🤖 Extracted {len(results)} raw price records")
    return results


def normalize_records(raw_records: List[Dict[str, Any]], profile: CountryProfile) -> List[PriceRecord]:
    """
    Fill in missing currencies and wrap raw records into PriceRecord objects.

    Records whose currency is absent or empty get the profile's currency. All
    other fields are passed through unchanged, even when malformed.
    """
    records = []
    for raw in raw_records:
        if not isinstance(raw, dict):
            logger.warning(f"Skipping non-object record: {raw!r}")
            continue

        data = dict(raw)
        if not data.get("currency"):
            data["currency"] = profile.currency_code

        records.append(PriceRecord.model_validate(data))

    return records
