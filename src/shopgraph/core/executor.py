"""Execution of converted requests against the Shopify GraphQL endpoint."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

import httpx

from shopgraph.config import ShopifySettings
from shopgraph.core.bulk import execute_bulk
from shopgraph.core.formatter import convert_to_graphql
from shopgraph.core.validation import get_validation_errors
from shopgraph.models import BulkResponse, GraphQLRequest, GraphQLResponse

logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"
INVALID_ENDPOINT_ERROR = (
    "Invalid GraphQLEndpoint configuration: endpoint must be absolute or store URL must be set."
)


def _is_absolute(url: str) -> bool:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return False
    return parsed.is_absolute_url and bool(parsed.host)


def resolve_endpoint(settings: ShopifySettings) -> str | None:
    """Return the absolute GraphQL endpoint, or ``None`` if it cannot be built.

    An absolute ``graphql_endpoint`` wins; a relative one is joined onto
    ``store_url``.
    """
    endpoint = settings.graphql_endpoint
    if _is_absolute(endpoint):
        return endpoint
    if _is_absolute(settings.store_url):
        return str(httpx.URL(settings.store_url).join(endpoint))
    return None


class ShopifyExecutor:
    """Sends converted requests to one store and normalizes the replies.

    The HTTP client is configured once with the JSON ``Accept`` header and
    the store access token, and is safe to share between concurrent calls.
    """

    def __init__(self, settings: ShopifySettings, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._client = client or httpx.AsyncClient(timeout=settings.timeout)
        self._client.headers.update(
            {
                "Accept": "application/json",
                ACCESS_TOKEN_HEADER: settings.access_token,
            }
        )
        self._endpoint = resolve_endpoint(settings)
        if self._endpoint is not None:
            logger.info("Using GraphQL endpoint: %s", self._endpoint)

    @property
    def settings(self) -> ShopifySettings:
        return self._settings

    @property
    def endpoint(self) -> str | None:
        return self._endpoint

    async def execute(self, request: GraphQLRequest) -> GraphQLResponse:
        logger.info("Executing request for resource: %s", request.resource)

        errors = get_validation_errors(request)
        if errors:
            joined = ", ".join(errors)
            logger.warning("Invalid request: %s", joined)
            return GraphQLResponse(success=False, error=f"Invalid request: {joined}")

        query: str | None = None
        try:
            query = convert_to_graphql(request)

            if self._endpoint is None:
                return GraphQLResponse(success=False, error=INVALID_ENDPOINT_ERROR)

            response = await self._client.post(self._endpoint, json={"query": query})
            body = response.text

            if not response.is_success:
                logger.warning("HTTP error: %s - %s", response.status_code, body)
                return GraphQLResponse(
                    success=False,
                    error=f"HTTP error: {response.status_code} - {body}",
                    query=query,
                )

            payload = json.loads(body)
            if "errors" in payload:
                message = json.dumps(payload["errors"])
                logger.warning("GraphQL error: %s", message)
                return GraphQLResponse(success=False, error=message, query=query)

            return GraphQLResponse(success=True, data=payload.get("data"), query=query)
        except Exception as exc:
            logger.exception("Error executing GraphQL request")
            return GraphQLResponse(success=False, error=f"Error: {exc}", query=query)

    async def execute_bulk(self, requests: Sequence[GraphQLRequest]) -> BulkResponse:
        return await execute_bulk(self.execute, requests)

    async def aclose(self) -> None:
        await self._client.aclose()
