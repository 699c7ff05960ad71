from __future__ import annotations

from collections.abc import Iterator

from portfolio.config import get_content_dir
from portfolio.core.ports.store import ContentStore
from portfolio.store.filesystem import FileSystemContentStore

_store: FileSystemContentStore | None = None


def get_content_store() -> FileSystemContentStore:
    """Return the process-wide store, creating it lazily on first call."""
    global _store  # noqa: PLW0603
    if _store is None:
        _store = FileSystemContentStore(get_content_dir(), fail_fast=False)
    return _store


def get_store() -> Iterator[ContentStore]:
    """FastAPI dependency yielding the ``ContentStore``."""
    yield get_content_store()


def reset_store() -> None:
    global _store  # noqa: PLW0603
    _store = None
