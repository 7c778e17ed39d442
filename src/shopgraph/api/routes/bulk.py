from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from shopgraph.api.dependencies import get_executor
from shopgraph.api.errors import error_response
from shopgraph.core.ports.executor import RequestExecutor
from shopgraph.models import BulkRequest, BulkResponse, GraphQLResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bulk", tags=["bulk"])


@router.post(
    "",
    response_model=BulkResponse,
    response_model_by_alias=True,
    responses={400: {"model": GraphQLResponse}, 500: {"model": GraphQLResponse}},
)
async def execute_bulk(
    body: BulkRequest,
    executor: RequestExecutor = Depends(get_executor),
) -> BulkResponse | JSONResponse:
    """Run several requests sequentially; results keep the input order."""
    logger.info("Received bulk request with %d items", len(body.requests))

    if not body.requests:
        logger.warning("Bad request: No requests provided in bulk operation")
        return error_response(400, "No requests provided in bulk operation")

    try:
        return await executor.execute_bulk(body.requests)
    except Exception:
        logger.exception("Error processing bulk request")
        return error_response(500, "An internal server error occurred during bulk processing")
