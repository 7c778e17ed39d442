import os
from dataclasses import dataclass

DEFAULT_API_VERSION = "2024-01"


@dataclass(frozen=True)
class ShopifySettings:
    store_url: str = ""
    api_version: str = DEFAULT_API_VERSION
    access_token: str = ""
    graphql_endpoint: str = ""
    timeout: float = 30.0


def load_settings() -> ShopifySettings:
    """Read store settings from the environment.

    ``SHOPIFY_GRAPHQL_ENDPOINT`` may be absolute or relative to
    ``SHOPIFY_STORE_URL``; it defaults to the Admin API path for the
    configured API version.
    """
    api_version = os.getenv("SHOPIFY_API_VERSION", DEFAULT_API_VERSION)
    return ShopifySettings(
        store_url=os.getenv("SHOPIFY_STORE_URL", ""),
        api_version=api_version,
        access_token=os.getenv("SHOPIFY_ACCESS_TOKEN", ""),
        graphql_endpoint=os.getenv("SHOPIFY_GRAPHQL_ENDPOINT", f"/admin/api/{api_version}/graphql.json"),
        timeout=float(os.getenv("SHOPIFY_TIMEOUT", "30")),
    )
