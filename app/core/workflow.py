"""
Two-stage price search workflow using LangGraph: web search discovery, then
structured extraction and currency normalization.
"""

from langchain_core.runnables import Runnable
from langgraph.graph import StateGraph, END

from app.models import GraphState
from app.agents.llm_agents import discover_listings, extract_prices, normalize_records
from app.logger_config import get_logger


logger = get_logger(__name__)


def create_workflow(search_llm: Runnable, extraction_llm: Runnable):
    """Create and compile the workflow graph for the given LLM runnables."""

    async def discovery_agent(state: GraphState) -> GraphState:
        """AGENT: Search the web for listings of the product."""
        logger.info("---AGENT: Discovery---")
        state["discovery"] = await discover_listings(search_llm, state["query"], state["profile"])
        return state

    async def extraction_agent(state: GraphState) -> GraphState:
        """AGENT: Extract structured price records from the discovery text."""
        logger.info("---AGENT: Extraction---")
        state["extracted"] = await extract_prices(extraction_llm, state["discovery"])
        return state

    workflow = StateGraph(GraphState)

    workflow.add_node("discovery", discovery_agent)
    workflow.add_node("extraction", extraction_agent)
    workflow.add_node("normalization", normalization_agent)

    workflow.set_entry_point("discovery")
    workflow.add_edge("discovery", "extraction")
    workflow.add_edge("extraction", "normalization")
    workflow.add_edge("normalization", END)

    return workflow.compile()


async def normalization_agent(state: GraphState) -> GraphState:
    """AGENT: Default missing currencies to the country's currency."""
    logger.info("---AGENT: Normalization---")
    profile = state["profile"]
    records = normalize_records(state["extracted"], profile)
    state["results"] = records
    logger.info(f"✅ {len(records)} price records for {profile.code}")
    return state
