from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from portfolio.models import BlogPost, Book, BookStatus, Project


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    content: str = "up"


class ProjectOut(BaseModel):
    slug: str
    name: str
    description: str
    accent: str
    repo: str
    live: str
    image: str

    @classmethod
    def from_project(cls, project: Project) -> ProjectOut:
        return cls(slug=project.slug, **project.model_dump())


class BookOut(BaseModel):
    title: str
    author: str
    status: BookStatus

    @classmethod
    def from_book(cls, book: Book) -> BookOut:
        return cls(**book.model_dump())


class BookSummary(BaseModel):
    total: int
    by_status: dict[str, int]


class PostSummary(BaseModel):
    slug: str
    title: str
    description: str
    publish_date: date
    updated_date: date | None
    tags: list[str]
    reading_time: int

    @classmethod
    def from_post(cls, post: BlogPost) -> PostSummary:
        fm = post.frontmatter
        return cls(
            slug=post.slug,
            title=fm.title,
            description=fm.description,
            publish_date=fm.publish_date,
            updated_date=fm.updated_date,
            tags=list(fm.tags),
            reading_time=post.reading_time,
        )


class PostDetail(PostSummary):
    body: str
    word_count: int

    @classmethod
    def from_post(cls, post: BlogPost) -> PostDetail:
        summary = PostSummary.from_post(post)
        return cls(**summary.model_dump(), body=post.body, word_count=post.word_count)


class PageLinks(BaseModel):
    self_link: str = Field(serialization_alias="self")
    next: str | None = None


class PostPage(BaseModel):
    data: list[PostSummary]
    links: PageLinks


class TagCount(BaseModel):
    tag: str
    count: int
