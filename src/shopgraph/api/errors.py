from __future__ import annotations

from fastapi.responses import JSONResponse

from shopgraph.models import GraphQLResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    """A failed envelope with no data or query, sent with *status_code*."""
    body = GraphQLResponse(success=False, error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())
