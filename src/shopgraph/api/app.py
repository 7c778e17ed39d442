from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shopgraph.api.lifespan import lifespan
from shopgraph.api.middleware import ErrorHandlingMiddleware
from shopgraph.api.routes.bulk import router as bulk_router
from shopgraph.api.routes.graphql import router as graphql_router
from shopgraph.api.routes.health import router as health_router
from shopgraph.api.routes.root import router as root_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Shopgraph API",
        description="Translate simplified JSON requests into Shopify GraphQL and run them.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(graphql_router)
    app.include_router(bulk_router)

    return app
