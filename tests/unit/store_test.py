from collections.abc import Callable
from pathlib import Path

import pytest

from portfolio.core.errors import ContentError
from portfolio.core.ports.store import ContentStore
from portfolio.data import BOOKS, PROJECTS
from portfolio.models import BookStatus
from portfolio.store import FileSystemContentStore, InMemoryContentStore


class TestInMemoryContentStore:
    def test_implements_protocol(self, memory_store: InMemoryContentStore) -> None:
        store: ContentStore = memory_store
        assert store.ping() is True

    def test_posts_newest_first_without_drafts(self, memory_store: InMemoryContentStore) -> None:
        assert [p.slug for p in memory_store.list_posts()] == ["alpha", "beta", "gamma"]

    def test_posts_with_drafts(self, memory_store: InMemoryContentStore) -> None:
        assert [p.slug for p in memory_store.list_posts(include_drafts=True)][0] == "delta"

    def test_filter_by_tag_is_case_insensitive(self, memory_store: InMemoryContentStore) -> None:
        assert [p.slug for p in memory_store.list_posts(tag=" BFF ")] == ["beta"]

    def test_get_post_hides_drafts(self, memory_store: InMemoryContentStore) -> None:
        assert memory_store.get_post("delta") is None
        draft = memory_store.get_post("delta", include_drafts=True)
        assert draft is not None
        assert draft.draft is True

    def test_get_unknown_post(self, memory_store: InMemoryContentStore) -> None:
        assert memory_store.get_post("missing") is None

    def test_tags_ignore_drafts(self, memory_store: InMemoryContentStore) -> None:
        assert memory_store.list_tags() == [("graphql", 2), ("bff", 1), ("security", 1)]

    def test_books_by_status(self, memory_store: InMemoryContentStore) -> None:
        assert [b.title for b in memory_store.list_books(BookStatus.FINISHED)] == ["Carrie", "Normal People"]
        assert len(memory_store.list_books()) == 4

    def test_get_project_by_slug(self, memory_store: InMemoryContentStore) -> None:
        project = memory_store.get_project("yenko-studio")
        assert project is not None
        assert project.name == "Yenko Studio"
        assert memory_store.get_project("nope") is None


class TestFileSystemContentStore:
    def test_defaults_to_static_collections(self, content_dir: Path) -> None:
        store = FileSystemContentStore(content_dir)
        assert store.list_projects() == list(PROJECTS)
        assert store.list_books() == list(BOOKS)

    def test_loads_posts(self, content_dir: Path) -> None:
        store = FileSystemContentStore(content_dir)
        assert [p.slug for p in store.list_posts()] == ["newer", "older"]
        assert store.get_post("wip") is None
        assert store.get_post("wip", include_drafts=True) is not None

    def test_reload_picks_up_new_posts(self, content_dir: Path, write_post: Callable[..., Path]) -> None:
        store = FileSystemContentStore(content_dir)
        write_post(content_dir, "newest", publish_date="2025-01-01")
        store.reload()
        assert store.list_posts()[0].slug == "newest"

    def test_failed_reload_keeps_previous_snapshot(self, content_dir: Path) -> None:
        store = FileSystemContentStore(content_dir)
        (content_dir / "broken.md").write_text("no front matter", encoding="utf-8")
        with pytest.raises(ContentError):
            store.reload()
        assert [p.slug for p in store.list_posts()] == ["newer", "older"]

    def test_broken_content_fails_construction(self, content_dir: Path) -> None:
        (content_dir / "broken.md").write_text("no front matter", encoding="utf-8")
        with pytest.raises(ContentError):
            FileSystemContentStore(content_dir)

    def test_ping_reflects_directory(self, tmp_path: Path) -> None:
        store = FileSystemContentStore(tmp_path / "absent")
        assert store.list_posts() == []
        assert store.ping() is False

    def test_lenient_store_survives_broken_content(self, content_dir: Path) -> None:
        (content_dir / "broken.md").write_text("no front matter", encoding="utf-8")
        store = FileSystemContentStore(content_dir, fail_fast=False)

        assert store.list_projects() == list(PROJECTS)
        assert store.list_books(BookStatus.READING) == [b for b in BOOKS if b.status is BookStatus.READING]
        assert store.ping() is False
        assert store.load_error is not None
        with pytest.raises(ContentError, match="unavailable"):
            store.list_posts()
        with pytest.raises(ContentError):
            store.get_post("newer")

    def test_lenient_store_recovers_after_fix(self, content_dir: Path) -> None:
        broken = content_dir / "broken.md"
        broken.write_text("no front matter", encoding="utf-8")
        store = FileSystemContentStore(content_dir, fail_fast=False)

        broken.unlink()
        store.reload()
        assert store.ping() is True
        assert store.load_error is None
        assert [p.slug for p in store.list_posts()] == ["newer", "older"]

    def test_failed_reload_marks_store_down(self, content_dir: Path) -> None:
        store = FileSystemContentStore(content_dir)
        (content_dir / "broken.md").write_text("no front matter", encoding="utf-8")
        with pytest.raises(ContentError):
            store.reload()
        assert store.ping() is False
        assert len(store.list_posts()) == 2
