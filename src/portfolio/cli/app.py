import logging
from typing import Annotated

import typer

from portfolio.cli.content import list_app
from portfolio.cli.serve import serve
from portfolio.cli.validate import validate

app = typer.Typer(
    name="portfolio",
    help="Inspect, check, and serve the portfolio site content.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(list_app, name="list")
app.command("validate")(validate)
app.command("serve")(serve)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show INFO log messages.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    app()
