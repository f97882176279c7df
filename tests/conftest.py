"""Pytest configuration and shared fixtures."""

from typing import Any, Dict, List, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from app.config import Settings
from app.main import create_app
from app.services.price_comparison_service import PriceSearchService


class FakeLLM:
    """Stands in for a bound ChatOpenAI runnable; records what it was called with."""

    def __init__(self, response: Optional[AIMessage] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Any] = []

    async def ainvoke(self, input, config=None, **kwargs):
        self.calls.append(input)
        if self.error is not None:
            raise self.error
        return self.response


def search_response(text: str) -> AIMessage:
    return AIMessage(content=text)


def extraction_response(results: List[Dict[str, Any]]) -> AIMessage:
    return AIMessage(
        content="",
        tool_calls=[{"name": "extract_prices", "args": {"results": results}, "id": "call_1"}],
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="sk-test")


@pytest.fixture
def search_llm() -> FakeLLM:
    return FakeLLM(search_response("1. Apple iPhone 16 Pro 128GB - $999 - https://www.amazon.com/dp/B0DHJ"))


@pytest.fixture
def extraction_llm() -> FakeLLM:
    return FakeLLM(extraction_response([
        {"link": "https://www.amazon.com/dp/1", "price": 999, "currency": "USD", "productName": "iPhone 16 Pro 128GB"},
        {"link": "https://www.ebay.com/itm/2", "price": 899, "currency": "USD", "productName": "iPhone 16 Pro 128GB"},
        {"link": "https://www.walmart.com/ip/3", "price": 949, "currency": "", "productName": "iPhone 16 Pro 128GB"},
    ]))


@pytest.fixture
def price_service(settings, search_llm, extraction_llm) -> PriceSearchService:
    return PriceSearchService(settings, search_llm=search_llm, extraction_llm=extraction_llm)


@pytest.fixture
def app(settings, price_service) -> FastAPI:
    return create_app(settings=settings, price_service=price_service)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
