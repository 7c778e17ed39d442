from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence

from shopgraph.models import BulkResponse, BulkResponseItem, GraphQLRequest, GraphQLResponse

logger = logging.getLogger(__name__)


async def execute_bulk(
    execute: Callable[[GraphQLRequest], Awaitable[GraphQLResponse]],
    requests: Sequence[GraphQLRequest],
) -> BulkResponse:
    """Run *requests* one after another and aggregate their envelopes.

    Each request finishes before the next one starts, so ``responses[i]``
    always belongs to ``requests[i]``. Failures never stop the batch.
    """
    logger.info("Executing bulk request with %d items", len(requests))

    bulk = BulkResponse()
    for index, request in enumerate(requests):
        result = await execute(request)
        bulk.responses.append(BulkResponseItem(index=index, response=result))

        bulk.total_processed += 1
        if result.success:
            bulk.success_count += 1
        else:
            bulk.fail_count += 1

    logger.info(
        "Bulk request completed: %d succeeded, %d failed",
        bulk.success_count,
        bulk.fail_count,
    )
    return bulk
