from __future__ import annotations

from collections.abc import AsyncIterator

from shopgraph.config import ShopifySettings, load_settings
from shopgraph.core.executor import ShopifyExecutor
from shopgraph.core.ports.executor import RequestExecutor

_executor: ShopifyExecutor | None = None


def get_settings() -> ShopifySettings:
    return load_settings()


async def get_executor() -> AsyncIterator[RequestExecutor]:
    """Yield a ``RequestExecutor``, creating it lazily on first call."""
    global _executor  # noqa: PLW0603
    if _executor is None:
        _executor = ShopifyExecutor(load_settings())
    yield _executor


async def shutdown_executor() -> None:
    global _executor  # noqa: PLW0603
    if _executor is not None:
        await _executor.aclose()
        _executor = None
