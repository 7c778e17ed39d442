"""Shared fixtures and helpers for tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from shopgraph.config import ShopifySettings
from shopgraph.core.executor import ShopifyExecutor
from shopgraph.models import GraphQLRequest

_REPO_ROOT = Path(__file__).parent.parent

STORE_URL = "https://test-store.myshopify.com"
ENDPOINT = f"{STORE_URL}/admin/api/2023-10/graphql.json"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# StubStore: records upstream calls and answers with canned replies
# ---------------------------------------------------------------------------


class StubStore:
    """Stands in for the Shopify GraphQL endpoint behind ``httpx.MockTransport``."""

    def __init__(self, *replies: httpx.Response) -> None:
        self.replies = list(replies)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            return httpx.Response(200, json={"data": {}})
        return self.replies.pop(0)

    def sent_queries(self) -> list[str]:
        return [json.loads(r.content)["query"] for r in self.requests]


def make_executor(
    store: StubStore | Callable[[httpx.Request], httpx.Response],
    settings: ShopifySettings | None = None,
) -> ShopifyExecutor:
    settings = settings or ShopifySettings(
        store_url=STORE_URL,
        api_version="2023-10",
        access_token="test-token",
        graphql_endpoint=ENDPOINT,
    )
    client = httpx.AsyncClient(transport=httpx.MockTransport(store))
    return ShopifyExecutor(settings, client=client)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> ShopifySettings:
    return ShopifySettings(
        store_url=STORE_URL,
        api_version="2023-10",
        access_token="test-token",
        graphql_endpoint=ENDPOINT,
    )


@pytest.fixture
def products_query() -> GraphQLRequest:
    return GraphQLRequest(operation="query", resource="products", fields=["id", "title"])


@pytest.fixture
def product_mutation() -> GraphQLRequest:
    return GraphQLRequest(
        operation="mutation",
        resource="product",
        fields=["product { id }", "userErrors { field, message }"],
        data={"title": "Test Product", "productType": "Test"},
    )


def products_payload() -> dict[str, Any]:
    return {"data": {"products": [{"id": "1", "title": "Product 1"}]}}
