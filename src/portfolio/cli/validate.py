from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from portfolio.config import get_content_dir
from portfolio.core.validation import validate_all

console = Console()


def validate(
    content_dir: Annotated[
        Path | None, typer.Option("--content-dir", help="Posts directory (default: $PORTFOLIO_CONTENT_DIR).")
    ] = None,
) -> None:
    """Check projects, books, and post front matter for shape errors."""
    directory = content_dir or get_content_dir()
    issues = validate_all(directory)
    if not issues:
        console.print(f"[green]All content is valid[/green] (posts in {directory})")
        return

    table = Table(show_lines=False)
    for h in ("kind", "ref", "problem"):
        table.add_column(h)
    for issue in issues:
        table.add_row(issue.kind, issue.ref, issue.message)
    console.print(table)
    console.print(f"[red]{len(issues)} issue(s) found[/red]")
    raise typer.Exit(1)
