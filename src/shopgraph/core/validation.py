from shopgraph.models import GraphQLRequest

OPERATIONS = ("query", "mutation")


def is_mutation(request: GraphQLRequest) -> bool:
    return request.operation.lower() == "mutation"


def get_validation_errors(request: GraphQLRequest) -> list[str]:
    """Return every problem with *request*, in a fixed check order.

    An empty list means the request can be converted to GraphQL.
    """
    errors: list[str] = []

    if not request.resource.strip():
        errors.append("Resource cannot be empty")

    if not request.fields:
        errors.append("At least one field must be specified")

    if request.operation.lower() not in OPERATIONS:
        errors.append("Operation must be either 'query' or 'mutation'")

    if is_mutation(request) and not request.data:
        errors.append("Data is required for mutations")

    return errors


def validate_request(request: GraphQLRequest) -> bool:
    return not get_validation_errors(request)
