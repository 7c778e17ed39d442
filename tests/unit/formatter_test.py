"""Tests for JSON request to GraphQL conversion."""

from __future__ import annotations

from typing import Any

import pytest

from shopgraph.core.formatter import InvalidRequestError, convert_to_graphql, format_value, mutation_name
from shopgraph.models import GraphQLRequest


class TestFormatValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "null"),
            ("Shirt", '"Shirt"'),
            ('say "hi"', '"say \\"hi\\""'),
            (True, "true"),
            (False, "false"),
            (5, "5"),
            (0, "0"),
            (19.99, "19.99"),
            ([], "[]"),
            ([1, "a", None], '[1, "a", null]'),
            ({"amount": 10, "currency": "EUR"}, '{ amount: 10, currency: "EUR" }'),
        ],
        ids=[
            "null",
            "string",
            "escaped-quotes",
            "true",
            "false",
            "int",
            "zero",
            "float",
            "empty-list",
            "mixed-list",
            "object",
        ],
    )
    def test_renders_literal(self, value: Any, expected: str) -> None:
        assert format_value(value) == expected

    def test_nested_structures(self) -> None:
        value = {"variants": [{"price": "9.99", "taxable": False}], "tags": ["a", "b"]}
        assert format_value(value) == '{ variants: [{ price: "9.99", taxable: false }], tags: ["a", "b"] }'


class TestMutationName:
    def _mutation(self, **parameters: Any) -> GraphQLRequest:
        return GraphQLRequest(
            operation="mutation", resource="product", fields=["product { id }"], parameters=parameters
        )

    def test_defaults_to_create(self) -> None:
        assert mutation_name(self._mutation()) == "productCreate"

    @pytest.mark.parametrize(
        ("hint", "expected"),
        [("create", "productCreate"), ("update", "productUpdate"), ("delete", "productDelete")],
    )
    def test_known_operations_get_resource_prefix(self, hint: str, expected: str) -> None:
        assert mutation_name(self._mutation(operation=hint)) == expected

    def test_hint_is_case_insensitive(self) -> None:
        assert mutation_name(self._mutation(operation="UPDATE")) == "productUpdate"

    def test_unknown_hint_is_used_as_whole_name(self) -> None:
        assert mutation_name(self._mutation(operation="orderCancel")) == "ordercancel"


class TestConvertQuery:
    def test_simple_query_layout(self, products_query: GraphQLRequest) -> None:
        assert convert_to_graphql(products_query) == "query {\n  products {\n    id\n    title\n  }\n}\n"

    def test_query_with_parameters(self) -> None:
        request = GraphQLRequest(resource="products", fields=["id", "title"], parameters={"first": 5})
        assert "products(first: 5)" in convert_to_graphql(request)

    def test_query_with_filters(self) -> None:
        request = GraphQLRequest(resource="products", fields=["id", "title"], filters={"title": "Test"})
        assert 'products(query: { title: "Test" })' in convert_to_graphql(request)

    def test_filters_come_after_parameters(self) -> None:
        request = GraphQLRequest(
            resource="products",
            fields=["id"],
            parameters={"first": 5, "reverse": True},
            filters={"title": "Shirt", "vendor": "Acme"},
        )
        assert (
            'products(first: 5, reverse: true, query: { title: "Shirt", vendor: "Acme" }) {'
            in convert_to_graphql(request)
        )

    def test_nested_field_fragments_are_verbatim(self) -> None:
        request = GraphQLRequest(
            resource="products",
            fields=["edges { node { id title } }", "pageInfo { hasNextPage }"],
            parameters={"first": 10},
        )
        assert convert_to_graphql(request) == (
            "query {\n"
            "  products(first: 10) {\n"
            "    edges { node { id title } }\n"
            "    pageInfo { hasNextPage }\n"
            "  }\n"
            "}\n"
        )

    def test_operation_label_is_lower_cased(self) -> None:
        request = GraphQLRequest(operation="QUERY", resource="orders", fields=["id"])
        assert convert_to_graphql(request).startswith("query {\n")


class TestConvertMutation:
    def test_simple_mutation(self, product_mutation: GraphQLRequest) -> None:
        result = convert_to_graphql(product_mutation)
        assert result.startswith("mutation {\n")
        assert "productCreate(input: {" in result
        assert 'title: "Test Product"' in result
        assert 'productType: "Test"' in result
        assert "    product { id }\n" in result
        assert "    userErrors { field, message }\n" in result
        assert result.endswith("  }\n}\n")

    def test_input_block_layout(self) -> None:
        request = GraphQLRequest(
            operation="mutation", resource="product", fields=["product { id }"], data={"title": "Test Product"}
        )
        assert 'productCreate(input: { title: "Test Product" }) {' in convert_to_graphql(request)

    def test_mutation_with_update_operation(self) -> None:
        request = GraphQLRequest(
            operation="mutation",
            resource="product",
            fields=["product { id }"],
            parameters={"operation": "update"},
            data={"id": "gid://shopify/Product/12345", "title": "Updated Product"},
        )
        result = convert_to_graphql(request)
        assert "productUpdate(input: {" in result
        assert 'id: "gid://shopify/Product/12345"' in result
        assert 'title: "Updated Product"' in result

    def test_mutation_ignores_filters_and_other_parameters(self) -> None:
        request = GraphQLRequest(
            operation="mutation",
            resource="customer",
            fields=["customer { id }"],
            parameters={"operation": "delete", "first": 1},
            filters={"email": "a@b.c"},
            data={"id": "gid://shopify/Customer/1"},
        )
        assert convert_to_graphql(request) == (
            "mutation {\n"
            '  customerDelete(input: { id: "gid://shopify/Customer/1" }) {\n'
            "    customer { id }\n"
            "  }\n"
            "}\n"
        )


class TestConvertInvalid:
    def test_invalid_request_raises(self) -> None:
        request = GraphQLRequest(resource="", fields=["id", "title"])
        with pytest.raises(InvalidRequestError, match="Resource cannot be empty"):
            convert_to_graphql(request)

    def test_error_carries_all_violations(self) -> None:
        request = GraphQLRequest(operation="mutation", resource="", fields=[])
        with pytest.raises(InvalidRequestError) as exc_info:
            convert_to_graphql(request)
        assert str(exc_info.value) == (
            "Invalid request: Resource cannot be empty, At least one field must be specified, "
            "Data is required for mutations"
        )
        assert len(exc_info.value.errors) == 3

    def test_invalid_request_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            convert_to_graphql(GraphQLRequest(operation="subscribe", resource="products", fields=["id"]))
