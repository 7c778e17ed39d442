"""Conversion of simplified JSON requests into GraphQL query text."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from shopgraph.core.validation import get_validation_errors, is_mutation
from shopgraph.models import GraphQLRequest, Value

logger = logging.getLogger(__name__)

_MUTATION_SUFFIXES = {"create": "Create", "update": "Update", "delete": "Delete"}


class InvalidRequestError(ValueError):
    """Raised when a request cannot be converted to GraphQL."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(f"Invalid request: {', '.join(errors)}")
        self.errors = errors


def format_value(value: Value) -> str:
    """Render *value* as a GraphQL literal."""
    if value is None:
        return "null"
    if isinstance(value, str):
        escaped = value.replace('"', '\\"')
        return f'"{escaped}"'
    # bool before numbers: True is an int.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping):
        return f"{{ {_format_pairs(value)} }}"
    if isinstance(value, list | tuple):
        return f"[{', '.join(format_value(item) for item in value)}]"
    return str(value)


def _format_pairs(values: Mapping[str, Value]) -> str:
    return ", ".join(f"{key}: {format_value(val)}" for key, val in values.items())


def mutation_name(request: GraphQLRequest) -> str:
    """Derive the mutation field name from the ``operation`` parameter.

    ``create``/``update``/``delete`` are appended to the resource name; any
    other hint is used as the whole name. Without a hint the mutation creates.
    """
    hint = request.parameters.get("operation")
    if hint is None:
        return f"{request.resource}Create"
    op = str(hint).lower()
    suffix = _MUTATION_SUFFIXES.get(op)
    if suffix is None:
        return op
    return f"{request.resource}{suffix}"


def _field_lines(request: GraphQLRequest) -> list[str]:
    return [f"    {field}" for field in request.fields]


def _build_query(request: GraphQLRequest) -> list[str]:
    arguments = [f"{key}: {format_value(val)}" for key, val in request.parameters.items()]
    if request.filters:
        arguments.append(f"query: {{ {_format_pairs(request.filters)} }}")

    head = f"  {request.resource}"
    if arguments:
        head += f"({', '.join(arguments)})"
    return [f"{head} {{", *_field_lines(request), "  }"]


def _build_mutation(request: GraphQLRequest) -> list[str]:
    data = request.data or {}
    head = f"  {mutation_name(request)}(input: {{ {_format_pairs(data)} }}) {{"
    return [head, *_field_lines(request), "  }"]


def convert_to_graphql(request: GraphQLRequest) -> str:
    """Build the GraphQL document for *request*.

    The request is always re-validated; :class:`InvalidRequestError` carries
    every violation when it does not pass.
    """
    logger.info("Converting request for resource: %s", request.resource)

    errors = get_validation_errors(request)
    if errors:
        logger.warning("Invalid request: %s", ", ".join(errors))
        raise InvalidRequestError(errors)

    if is_mutation(request):
        body = _build_mutation(request)
        lines = ["mutation {", *body, "}"]
    else:
        body = _build_query(request)
        lines = ["query {", *body, "}"]

    query = "".join(f"{line}\n" for line in lines)
    logger.debug("Generated GraphQL: %s", query)
    return query
