"""FastMCP server exposing shopgraph tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from shopgraph.core.docs import get_documentation as _get_documentation
from shopgraph.core.formatter import InvalidRequestError, convert_to_graphql
from shopgraph.core.ports.executor import RequestExecutor
from shopgraph.models import GraphQLRequest


def create_mcp_server(executor: RequestExecutor) -> FastMCP:
    """Create a FastMCP server wired to the given executor."""

    mcp = FastMCP(
        "shopgraph",
        instructions="Convert simplified JSON requests to Shopify GraphQL and run them against the store.",
    )

    @mcp.tool()
    async def convert_request(request: GraphQLRequest) -> str:
        """Return the GraphQL generated for a request without sending it."""
        try:
            return convert_to_graphql(request)
        except InvalidRequestError as exc:
            return f"Error: {exc}"

    @mcp.tool()
    async def execute_request(request: GraphQLRequest) -> dict[str, Any]:
        """Run a request against the store and return the response envelope."""
        result = await executor.execute(request)
        return result.model_dump()

    @mcp.tool()
    async def execute_bulk(requests: list[GraphQLRequest]) -> dict[str, Any]:
        """Run requests sequentially and return the aggregated bulk envelope."""
        if not requests:
            return {"success": False, "error": "No requests provided in bulk operation"}
        result = await executor.execute_bulk(requests)
        return result.model_dump(by_alias=True)

    @mcp.tool()
    async def get_documentation() -> dict[str, Any]:
        """Describe supported resources, operations and the request format."""
        return _get_documentation()

    return mcp
