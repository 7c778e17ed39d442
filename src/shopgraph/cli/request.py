import asyncio
import json
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.json import JSON
from rich.markup import escape

from shopgraph.core.docs import get_documentation
from shopgraph.core.formatter import InvalidRequestError, convert_to_graphql
from shopgraph.core.ports.executor import RequestExecutor
from shopgraph.core.validation import get_validation_errors
from shopgraph.models import BulkRequest, GraphQLRequest

console = Console()
err_console = Console(stderr=True)

PayloadArg = Annotated[str, typer.Argument(help="JSON payload, or @path to read it from a file.")]


def _read_payload(payload: str) -> Any:
    text = Path(payload[1:]).read_text(encoding="utf-8") if payload.startswith("@") else payload
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        err_console.print(f"[red]Invalid JSON: {escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc


def _parse(model: type[GraphQLRequest] | type[BulkRequest], payload: str) -> Any:
    try:
        return model.model_validate(_read_payload(payload))
    except ValidationError as exc:
        err_console.print(f"[red]Malformed request:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _print_json(text: str) -> None:
    console.print(JSON(text), soft_wrap=True)


def _get_executor() -> RequestExecutor:
    from shopgraph.config import load_settings
    from shopgraph.core.executor import ShopifyExecutor

    return ShopifyExecutor(load_settings())


def convert(payload: PayloadArg) -> None:
    """Print the GraphQL generated for a request."""
    request = _parse(GraphQLRequest, payload)
    try:
        query = convert_to_graphql(request)
    except InvalidRequestError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    typer.echo(query, nl=False)


def validate(payload: PayloadArg) -> None:
    """List validation problems of a request."""
    request = _parse(GraphQLRequest, payload)
    errors = get_validation_errors(request)
    if not errors:
        console.print("[green]Request is valid[/green]")
        return
    for error in errors:
        err_console.print(f"[red]- {escape(error)}[/red]")
    raise typer.Exit(code=1)


def execute(payload: PayloadArg) -> None:
    """Run a request against the configured store and print the envelope."""
    request = _parse(GraphQLRequest, payload)
    executor = _get_executor()

    async def _run() -> None:
        try:
            result = await executor.execute(request)
            _print_json(result.model_dump_json())
        finally:
            await executor.aclose()

    asyncio.run(_run())


def bulk(payload: PayloadArg) -> None:
    """Run a {"requests": [...]} batch sequentially and print the bulk envelope."""
    body = _parse(BulkRequest, payload)
    if not body.requests:
        err_console.print("[red]No requests provided in bulk operation[/red]")
        raise typer.Exit(code=1)
    executor = _get_executor()

    async def _run() -> None:
        try:
            result = await executor.execute_bulk(body.requests)
            _print_json(result.model_dump_json(by_alias=True))
        finally:
            await executor.aclose()

    asyncio.run(_run())


def docs() -> None:
    """Print the supported resources and request format."""
    _print_json(json.dumps(get_documentation()))
