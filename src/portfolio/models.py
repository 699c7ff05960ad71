import re
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

_HEX_COLOR = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")
_SLUG_SPLIT = re.compile(r"[^a-z0-9]+")

WORDS_PER_MINUTE = 200


def slugify(value: str) -> str:
    """Lower-case ``value`` and collapse every non-alphanumeric run to a single dash."""
    return _SLUG_SPLIT.sub("-", value.lower()).strip("-")


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    accent: str = Field(min_length=1)
    repo: str = ""
    live: str = ""
    image: str = ""

    @field_validator("accent")
    @classmethod
    def _check_accent(cls, value: str) -> str:
        if not _HEX_COLOR.match(value):
            raise ValueError(f"accent must be a hex colour like #FF7E44, got {value!r}")
        return value

    @property
    def slug(self) -> str:
        return slugify(self.name)


class BookStatus(str, Enum):
    UP_NEXT = "Up Next"
    READING = "Reading"
    FINISHED = "Finished"


class Book(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    status: BookStatus


class PostFrontmatter(BaseModel):
    """Front-matter block at the top of a blog post.

    Accepts the camelCase keys used by static-site generators (``publishDate``,
    ``pubDate``, ``updatedDate``) as well as the snake_case field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(min_length=1)
    description: str = ""
    publish_date: date = Field(alias="publishDate")
    updated_date: date | None = Field(default=None, alias="updatedDate")
    tags: tuple[str, ...] = ()
    draft: bool = False

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("publish_date", "updated_date", mode="before")
    @classmethod
    def _truncate_timestamps(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            try:
                return datetime.fromisoformat(value).date()
            except ValueError:
                return value
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("tags must be a list of strings")
        seen: dict[str, None] = {}
        for raw in value:
            if raw is None:
                continue
            if not isinstance(raw, str):
                raise ValueError("tags must be a list of strings")
            tag = raw.strip().lower()
            if tag:
                seen.setdefault(tag, None)
        return tuple(seen)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "PostFrontmatter":
        if "publishDate" not in data and "publish_date" not in data and "pubDate" in data:
            data = {**data, "publishDate": data["pubDate"]}
        return cls.model_validate(data)


class BlogPost(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    frontmatter: PostFrontmatter
    body: str
    source_path: Path | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def word_count(self) -> int:
        return len(self.body.split())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def reading_time(self) -> int:
        """Estimated reading time in whole minutes, never less than one."""
        return max(1, round(self.word_count / WORDS_PER_MINUTE))

    @property
    def title(self) -> str:
        return self.frontmatter.title

    @property
    def publish_date(self) -> date:
        return self.frontmatter.publish_date

    @property
    def tags(self) -> tuple[str, ...]:
        return self.frontmatter.tags

    @property
    def draft(self) -> bool:
        return self.frontmatter.draft
