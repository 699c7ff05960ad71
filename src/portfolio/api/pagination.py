"""Cursor-based pagination for the post listing.

Cursors are opaque base64-encoded JSON holding a sort key (the ISO publish
date) and the slug for tie-breaking.
"""

from __future__ import annotations

import base64
import json
from collections.abc import Sequence

from portfolio.models import BlogPost

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def encode_cursor(sort_value: str, id_value: str) -> str:
    """Encode a sort value and ID into an opaque base64 cursor string."""
    payload = json.dumps({"s": sort_value, "i": id_value}, separators=(",", ":"))
    return base64.urlsafe_b64encode(payload.encode()).decode()


class InvalidCursorError(ValueError):
    """Raised when a cursor string cannot be decoded."""


def decode_cursor(cursor: str) -> tuple[str, str]:
    """Decode a cursor string back into (sort_value, id_value).

    Raises ``InvalidCursorError`` if the cursor is malformed.
    """
    try:
        payload = json.loads(base64.urlsafe_b64decode(cursor.encode()).decode())
        return str(payload["s"]), str(payload["i"])
    except (ValueError, KeyError, TypeError, UnicodeDecodeError) as exc:
        raise InvalidCursorError(f"Malformed cursor: {cursor!r}") from exc


def clamp_page_size(raw: str | int | None) -> int:
    try:
        size = int(raw) if raw is not None else DEFAULT_PAGE_SIZE
    except (ValueError, TypeError):
        return DEFAULT_PAGE_SIZE
    return max(1, min(size, MAX_PAGE_SIZE))


def post_cursor(post: BlogPost) -> str:
    return encode_cursor(post.publish_date.isoformat(), post.slug)


def paginate_posts(
    posts: Sequence[BlogPost], size: int, after: str | None = None
) -> tuple[list[BlogPost], str | None]:
    """Return one page of ``posts`` (already newest first) and the cursor for the next page.

    The page starts strictly after the post identified by ``after``; ordering is
    publish date descending, then slug ascending.
    """
    start = 0
    if after is not None:
        after_date, after_slug = decode_cursor(after)
        start = len(posts)
        for i, post in enumerate(posts):
            key = post.publish_date.isoformat()
            if key < after_date or (key == after_date and post.slug > after_slug):
                start = i
                break

    page = list(posts[start : start + size])
    has_next = start + size < len(posts)
    return page, post_cursor(page[-1]) if has_next and page else None
