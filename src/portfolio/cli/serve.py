import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

console = Console()


def serve(
    host: str = "127.0.0.1",
    port: int = 8000,
    content_dir: Annotated[
        Path | None, typer.Option("--content-dir", help="Posts directory (default: $PORTFOLIO_CONTENT_DIR).")
    ] = None,
    watch: Annotated[bool, typer.Option("--watch", help="Reload posts when files change.")] = False,
) -> None:
    """Start the read-only content API."""
    import uvicorn

    from portfolio.api.app import create_app

    if content_dir is not None:
        os.environ["PORTFOLIO_CONTENT_DIR"] = str(content_dir)
    if watch:
        os.environ["PORTFOLIO_WATCH"] = "1"

    app = create_app()
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)
