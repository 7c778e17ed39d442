from collections.abc import Sequence
from typing import Protocol

from shopgraph.models import BulkResponse, GraphQLRequest, GraphQLResponse


class RequestExecutor(Protocol):
    async def execute(self, request: GraphQLRequest) -> GraphQLResponse: ...

    async def execute_bulk(self, requests: Sequence[GraphQLRequest]) -> BulkResponse: ...

    async def aclose(self) -> None: ...
