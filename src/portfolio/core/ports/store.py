from typing import Protocol

from portfolio.models import BlogPost, Book, BookStatus, Project


class ContentStore(Protocol):
    def list_projects(self) -> list[Project]: ...

    def get_project(self, slug: str) -> Project | None: ...

    def list_books(self, status: BookStatus | None = None) -> list[Book]: ...

    def list_posts(self, tag: str | None = None, include_drafts: bool = False) -> list[BlogPost]: ...

    def get_post(self, slug: str, include_drafts: bool = False) -> BlogPost | None: ...

    def list_tags(self) -> list[tuple[str, int]]: ...

    def reload(self) -> None: ...

    def ping(self) -> bool: ...
