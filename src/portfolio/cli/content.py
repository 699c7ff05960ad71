from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from portfolio.config import get_content_dir
from portfolio.core.errors import ContentError
from portfolio.core.ports.store import ContentStore
from portfolio.models import BookStatus

list_app = typer.Typer(help="List portfolio content.")
console = Console()

ContentDirOption = Annotated[
    Path | None, typer.Option("--content-dir", help="Posts directory (default: $PORTFOLIO_CONTENT_DIR).")
]


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def _get_store(content_dir: Path | None = None, fail_fast: bool = True) -> ContentStore:
    from portfolio.store.filesystem import FileSystemContentStore

    try:
        return FileSystemContentStore(content_dir or get_content_dir(), fail_fast=fail_fast)
    except ContentError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc


@list_app.command("projects")
def projects() -> None:
    """List showcased projects."""
    store = _get_store(fail_fast=False)
    rows = [(p.name, p.accent, p.live or "-", p.repo or "-") for p in store.list_projects()]
    _render_table(["name", "accent", "live", "repo"], rows)


@list_app.command("books")
def books(
    status: Annotated[BookStatus | None, typer.Option(help="Only books with this reading status.")] = None,
) -> None:
    """List the reading list."""
    store = _get_store(fail_fast=False)
    rows = [(b.title, b.author, b.status.value) for b in store.list_books(status)]
    _render_table(["title", "author", "status"], rows)


@list_app.command("posts")
def posts(
    tag: Annotated[str | None, typer.Option(help="Only posts carrying this tag.")] = None,
    drafts: Annotated[bool, typer.Option("--drafts", help="Include draft posts.")] = False,
    content_dir: ContentDirOption = None,
) -> None:
    """List blog posts, newest first."""
    store = _get_store(content_dir)
    rows = [
        (p.publish_date.isoformat(), p.slug, p.title, ", ".join(p.tags), "yes" if p.draft else "")
        for p in store.list_posts(tag=tag, include_drafts=drafts)
    ]
    _render_table(["date", "slug", "title", "tags", "draft"], rows)


@list_app.command("tags")
def tags(content_dir: ContentDirOption = None) -> None:
    """List tags with the number of published posts using them."""
    store = _get_store(content_dir)
    _render_table(["tag", "posts"], store.list_tags())
