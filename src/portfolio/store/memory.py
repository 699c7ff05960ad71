from collections.abc import Iterable

from portfolio.core.posts import collect_tags, sort_posts
from portfolio.models import BlogPost, Book, BookStatus, Project


class InMemoryContentStore:
    """Content store over fixed sequences, used in tests and for embedding."""

    def __init__(
        self,
        projects: Iterable[Project] = (),
        books: Iterable[Book] = (),
        posts: Iterable[BlogPost] = (),
    ) -> None:
        self.projects: tuple[Project, ...] = tuple(projects)
        self.books: tuple[Book, ...] = tuple(books)
        self.posts: tuple[BlogPost, ...] = tuple(sort_posts(posts))

    def list_projects(self) -> list[Project]:
        return list(self.projects)

    def get_project(self, slug: str) -> Project | None:
        return next((p for p in self.projects if p.slug == slug), None)

    def list_books(self, status: BookStatus | None = None) -> list[Book]:
        if status is None:
            return list(self.books)
        return [b for b in self.books if b.status == status]

    def list_posts(self, tag: str | None = None, include_drafts: bool = False) -> list[BlogPost]:
        return filter_posts(self.posts, tag=tag, include_drafts=include_drafts)

    def get_post(self, slug: str, include_drafts: bool = False) -> BlogPost | None:
        return find_post(self.posts, slug, include_drafts=include_drafts)

    def list_tags(self) -> list[tuple[str, int]]:
        return collect_tags(self.list_posts())

    def reload(self) -> None:
        return None

    def ping(self) -> bool:
        return True


def filter_posts(posts: Iterable[BlogPost], tag: str | None = None, include_drafts: bool = False) -> list[BlogPost]:
    wanted = tag.strip().lower() if tag else None
    return [
        p for p in posts if (include_drafts or not p.draft) and (wanted is None or wanted in p.tags)
    ]


def find_post(posts: Iterable[BlogPost], slug: str, include_drafts: bool = False) -> BlogPost | None:
    for post in posts:
        if post.slug == slug:
            return post if include_drafts or not post.draft else None
    return None
