from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint: API directory for programmatic and human clients."""
    return {
        "meta": {
            "title": "Shopgraph API",
            "description": "Translate simplified JSON requests into Shopify GraphQL and run them.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "graphql": "/api/graphql",
            "bulk": "/api/bulk",
            "documentation": "/api/graphql/docs",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
