"""Shape checks for the portfolio content.

Every check reports problems as :class:`ValidationIssue` records instead of
raising, so a single run can surface everything that is wrong at once.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from portfolio.core.errors import ContentError
from portfolio.core.posts import is_post_file, load_post
from portfolio.models import Book, BookStatus, Project

logger = logging.getLogger(__name__)

_URL_FIELDS = ("repo", "live", "image")


@dataclass(frozen=True)
class ValidationIssue:
    kind: str
    ref: str
    message: str


def _as_mapping(record: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")
    return dict(record)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_url_or_empty(value: Any) -> bool:
    if value == "":
        return True
    return isinstance(value, str) and value.startswith(("http://", "https://"))


def validate_projects(records: Iterable[Mapping[str, Any] | BaseModel]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        data = _as_mapping(record)
        ref = str(data.get("name") or f"#{index}")

        for field in ("name", "description", "accent"):
            if _is_blank(data.get(field)):
                issues.append(ValidationIssue("project", ref, f"{field} must be a non-empty string"))

        if not _is_blank(data.get("accent")):
            try:
                Project.model_validate({"name": "x", "description": "x", "accent": data["accent"]})
            except ValidationError:
                issues.append(ValidationIssue("project", ref, f"accent {data['accent']!r} is not a hex colour"))

        for field in _URL_FIELDS:
            if field not in data:
                issues.append(ValidationIssue("project", ref, f"{field} is missing"))
            elif not _is_url_or_empty(data[field]):
                issues.append(ValidationIssue("project", ref, f"{field} must be an http(s) URL or empty"))

        name = data.get("name")
        if isinstance(name, str) and name:
            if name in seen:
                issues.append(ValidationIssue("project", ref, "duplicate project name"))
            seen.add(name)
    return issues


def validate_books(records: Iterable[Mapping[str, Any] | BaseModel]) -> list[ValidationIssue]:
    allowed = [s.value for s in BookStatus]
    issues: list[ValidationIssue] = []
    for index, record in enumerate(records):
        data = _as_mapping(record)
        ref = str(data.get("title") or f"#{index}")

        for field in ("title", "author"):
            if _is_blank(data.get(field)):
                issues.append(ValidationIssue("book", ref, f"{field} must be a non-empty string"))

        if data.get("status") not in allowed:
            issues.append(
                ValidationIssue("book", ref, f"status {data.get('status')!r} is not one of {', '.join(allowed)}")
            )
    return issues


def validate_posts_dir(directory: str | Path) -> list[ValidationIssue]:
    """Check every post file in ``directory``, drafts included."""
    root = Path(directory)
    if not root.is_dir():
        return [ValidationIssue("post", str(root), "posts directory does not exist")]

    issues: list[ValidationIssue] = []
    slugs: dict[str, Path] = {}
    for path in sorted(p for p in root.iterdir() if p.is_file() and is_post_file(p)):
        try:
            post = load_post(path)
        except ContentError as exc:
            message = str(exc).removeprefix(f"{path}: ")
            issues.append(ValidationIssue("post", path.name, message))
            continue
        if post.slug in slugs:
            issues.append(ValidationIssue("post", path.name, f"duplicate slug, also used by {slugs[post.slug].name}"))
        else:
            slugs[post.slug] = path
    return issues


def validate_all(content_dir: str | Path) -> list[ValidationIssue]:
    """Validate the static project and book collections plus every post under ``content_dir``."""
    from portfolio.data import BOOKS, PROJECTS

    issues = [
        *validate_projects(PROJECTS),
        *validate_books(BOOKS),
        *validate_posts_dir(content_dir),
    ]
    logger.info("Validation finished with %d issue(s)", len(issues))
    return issues
