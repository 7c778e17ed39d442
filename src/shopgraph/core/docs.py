from typing import Any

from shopgraph.models import GraphQLRequest

_RESOURCES: list[dict[str, Any]] = [
    {
        "name": "products",
        "description": "Shopify products",
        "operations": [
            {"name": "query", "description": "Retrieves products"},
            {"name": "create", "description": "Creates a new product"},
            {"name": "update", "description": "Updates an existing product"},
            {"name": "delete", "description": "Deletes a product"},
        ],
        "commonFields": ["id", "title", "description", "handle", "productType", "vendor", "status"],
    },
    {
        "name": "orders",
        "description": "Shopify orders",
        "operations": [
            {"name": "query", "description": "Retrieves orders"},
            {"name": "update", "description": "Updates an existing order"},
            {"name": "cancel", "description": "Cancels an order"},
        ],
        "commonFields": [
            "id",
            "name",
            "email",
            "createdAt",
            "totalPrice",
            "displayFinancialStatus",
            "displayFulfillmentStatus",
        ],
    },
    {
        "name": "customers",
        "description": "Shopify customers",
        "operations": [
            {"name": "query", "description": "Retrieves customers"},
            {"name": "create", "description": "Creates a new customer"},
            {"name": "update", "description": "Updates an existing customer"},
            {"name": "delete", "description": "Deletes a customer"},
        ],
        "commonFields": ["id", "firstName", "lastName", "email", "phone", "ordersCount", "totalSpent"],
    },
    {
        "name": "collections",
        "description": "Shopify collections",
        "operations": [
            {"name": "query", "description": "Retrieves collections"},
            {"name": "create", "description": "Creates a new collection"},
            {"name": "update", "description": "Updates an existing collection"},
            {"name": "delete", "description": "Deletes a collection"},
        ],
        "commonFields": ["id", "title", "handle", "description", "productsCount"],
    },
]

_USAGE = (
    "This API lets you interact with a Shopify store using JSON payloads that are converted to GraphQL. "
    "Each request names an operation type, a resource, the fields to return, and any parameters or filters. "
    "Mutations also carry a data object with the input fields; set parameters.operation to create, update or "
    "delete to choose the mutation. Every request returns a success flag with the data or an error message, "
    "plus the generated GraphQL for debugging."
)


def get_documentation() -> dict[str, Any]:
    """Static description of the supported resources and the request format."""
    example = GraphQLRequest(
        operation="query",
        resource="products",
        fields=["id", "title", "description"],
        parameters={"first": 5},
        filters={"title": "Shirt"},
    )
    return {
        "resources": _RESOURCES,
        "requestFormat": {
            "description": "Format of JSON request to be sent to the API",
            "example": example.model_dump(),
        },
        "usage": _USAGE,
    }
