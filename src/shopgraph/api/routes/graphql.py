from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from shopgraph.api.dependencies import get_executor
from shopgraph.api.errors import error_response
from shopgraph.core.docs import get_documentation
from shopgraph.core.formatter import InvalidRequestError
from shopgraph.core.ports.executor import RequestExecutor
from shopgraph.models import GraphQLRequest, GraphQLResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/graphql", tags=["graphql"])

INTERNAL_ERROR = "An internal server error occurred"


@router.post(
    "",
    response_model=GraphQLResponse,
    responses={400: {"model": GraphQLResponse}, 500: {"model": GraphQLResponse}},
)
async def execute(
    body: GraphQLRequest,
    executor: RequestExecutor = Depends(get_executor),
) -> GraphQLResponse | JSONResponse:
    """Convert a JSON request to GraphQL and run it against the store.

    Business failures (invalid requests, GraphQL errors, HTTP errors) still
    answer 200; check ``success`` in the envelope.
    """
    logger.info("Received request for resource: %s", body.resource)
    try:
        return await executor.execute(body)
    except InvalidRequestError as exc:
        logger.warning("Bad request: %s", exc)
        return error_response(400, str(exc))
    except Exception:
        logger.exception("Error processing request")
        return error_response(500, INTERNAL_ERROR)


@router.get("/docs")
async def docs() -> dict[str, Any]:
    """Supported resources, operations and the request format."""
    return get_documentation()
