"""Shared fixtures and helpers for tests."""

import textwrap
from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest

from portfolio.models import BlogPost, Book, BookStatus, PostFrontmatter, Project
from portfolio.store.memory import InMemoryContentStore

_TESTS_ROOT = Path(__file__).parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        rel = Path(str(item.fspath)).relative_to(_TESTS_ROOT)
        if rel.parts and rel.parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Content helpers
# ---------------------------------------------------------------------------


def _write_post(
    directory: Path,
    slug: str,
    title: str = "A post",
    publish_date: str = "2024-01-01",
    tags: str = "[]",
    draft: bool = False,
    body: str = "Some words here.",
    suffix: str = ".md",
) -> Path:
    path = directory / f"{slug}{suffix}"
    path.write_text(
        textwrap.dedent(
            f"""\
            ---
            title: "{title}"
            description: "About {slug}"
            publishDate: {publish_date}
            tags: {tags}
            draft: {str(draft).lower()}
            ---
            {body}
            """
        ),
        encoding="utf-8",
    )
    return path


def _make_post(
    slug: str,
    publish_date: date = date(2024, 1, 1),
    tags: tuple[str, ...] = (),
    draft: bool = False,
    body: str = "Some words here.",
) -> BlogPost:
    fm = PostFrontmatter(title=slug.title(), publish_date=publish_date, tags=tags, draft=draft)
    return BlogPost(slug=slug, frontmatter=fm, body=body)


@pytest.fixture
def write_post() -> Callable[..., Path]:
    """Factory writing a post file with front matter into a directory."""
    return _write_post


@pytest.fixture
def make_post() -> Callable[..., BlogPost]:
    """Factory building an in-memory ``BlogPost``."""
    return _make_post


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A posts directory with two published posts and one draft."""
    directory = tmp_path / "blog"
    directory.mkdir()
    _write_post(directory, "older", title="Older", publish_date="2024-01-10", tags="[graphql, api]")
    _write_post(directory, "newer", title="Newer", publish_date="2024-05-01", tags="[GraphQL, bff]")
    _write_post(directory, "wip", title="Work in progress", publish_date="2024-06-01", tags="[graphql]", draft=True)
    return directory


@pytest.fixture
def projects() -> list[Project]:
    return [
        Project(name="Kompa", description="Comparables marketplace.", accent="#FF7E44", live="https://kompa.test/"),
        Project(name="Yenko Studio", description="Digital products.", accent="#123", repo="https://git.test/yenko"),
    ]


@pytest.fixture
def books() -> list[Book]:
    return [
        Book(title="Homegoing", author="Yaa Gyasi", status=BookStatus.UP_NEXT),
        Book(title="The Leavers", author="Lisa Ko", status=BookStatus.READING),
        Book(title="Carrie", author="Stephen King", status=BookStatus.FINISHED),
        Book(title="Normal People", author="Sally Rooney", status=BookStatus.FINISHED),
    ]


@pytest.fixture
def memory_store(projects: list[Project], books: list[Book]) -> InMemoryContentStore:
    posts = [
        _make_post("alpha", date(2024, 3, 1), tags=("graphql",)),
        _make_post("beta", date(2024, 3, 1), tags=("graphql", "bff")),
        _make_post("gamma", date(2024, 1, 15), tags=("security",)),
        _make_post("delta", date(2024, 7, 1), draft=True),
    ]
    return InMemoryContentStore(projects=projects, books=books, posts=posts)
