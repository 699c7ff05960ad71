import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from portfolio.core.errors import ContentError
from portfolio.core.posts import collect_tags, load_posts
from portfolio.data import BOOKS, PROJECTS
from portfolio.models import BlogPost, Book, BookStatus, Project
from portfolio.store.memory import filter_posts, find_post

logger = logging.getLogger(__name__)


class FileSystemContentStore:
    """Serve the static collections plus the posts found in ``content_dir``.

    Posts are read eagerly, drafts included, and filtered on access. ``reload``
    swaps the whole snapshot, keeping the previous one if loading fails.

    With ``fail_fast=False`` a failed first load does not raise: projects and
    books stay available, post access raises ``ContentError`` and ``ping``
    reports the store as down until a reload succeeds.
    """

    def __init__(
        self,
        content_dir: str | Path,
        projects: Iterable[Project] = PROJECTS,
        books: Iterable[Book] = BOOKS,
        fail_fast: bool = True,
    ) -> None:
        self.content_dir = Path(content_dir)
        self._projects = tuple(projects)
        self._books = tuple(books)
        self._posts: tuple[BlogPost, ...] | None = None
        self._load_error: ContentError | None = None
        self._lock = threading.Lock()
        try:
            self.reload()
        except ContentError:
            if fail_fast:
                raise

    @property
    def load_error(self) -> ContentError | None:
        """Error from the most recent load, ``None`` once a load succeeds."""
        return self._load_error

    def list_projects(self) -> list[Project]:
        return list(self._projects)

    def get_project(self, slug: str) -> Project | None:
        return next((p for p in self._projects if p.slug == slug), None)

    def list_books(self, status: BookStatus | None = None) -> list[Book]:
        if status is None:
            return list(self._books)
        return [b for b in self._books if b.status == status]

    def list_posts(self, tag: str | None = None, include_drafts: bool = False) -> list[BlogPost]:
        return filter_posts(self._snapshot(), tag=tag, include_drafts=include_drafts)

    def get_post(self, slug: str, include_drafts: bool = False) -> BlogPost | None:
        return find_post(self._snapshot(), slug, include_drafts=include_drafts)

    def list_tags(self) -> list[tuple[str, int]]:
        return collect_tags(self.list_posts())

    def reload(self) -> None:
        with self._lock:
            try:
                posts = load_posts(self.content_dir, include_drafts=True)
            except ContentError as exc:
                self._load_error = exc
                kept = len(self._posts) if self._posts is not None else 0
                logger.exception("Reload of %s failed, keeping %d post(s)", self.content_dir, kept)
                raise
            self._posts = tuple(posts)
            self._load_error = None
        logger.info("Content store holds %d post(s) from %s", len(posts), self.content_dir)

    def ping(self) -> bool:
        return self._load_error is None and self.content_dir.is_dir()

    def _snapshot(self) -> tuple[BlogPost, ...]:
        if self._posts is None:
            raise ContentError(f"posts are unavailable: {self._load_error}") from self._load_error
        return self._posts
