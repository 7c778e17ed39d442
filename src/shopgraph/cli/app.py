import logging
from typing import Annotated

import typer

from shopgraph.cli.request import bulk, convert, docs, execute, validate
from shopgraph.cli.serve import serve_app

app = typer.Typer(
    name="shopgraph",
    help="Shopgraph CLI: convert JSON requests to Shopify GraphQL and run them.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    log_level: Annotated[str, typer.Option(help="Logging level (DEBUG, INFO, WARNING, ...).")] = "WARNING",
) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


app.command("convert")(convert)
app.command("validate")(validate)
app.command("execute")(execute)
app.command("bulk")(bulk)
app.command("docs")(docs)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
