import logging
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from portfolio.core.errors import ContentError, FrontmatterError
from portfolio.core.frontmatter import parse_frontmatter
from portfolio.models import BlogPost, PostFrontmatter

logger = logging.getLogger(__name__)

POST_EXTENSIONS: frozenset[str] = frozenset({".md", ".mdx"})


def is_post_file(path: Path) -> bool:
    return path.suffix.lower() in POST_EXTENSIONS


def load_post(path: str | Path) -> BlogPost:
    """Read a single Markdown/MDX file and validate its front matter."""
    post_path = Path(path)
    try:
        text = post_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContentError(f"cannot read post: {exc}", post_path) from exc
    except UnicodeDecodeError as exc:
        raise ContentError("post is not valid UTF-8", post_path) from exc

    try:
        data, body = parse_frontmatter(text)
    except FrontmatterError as exc:
        raise FrontmatterError(str(exc), post_path) from exc

    try:
        frontmatter = PostFrontmatter.from_mapping(data)
    except ValidationError as exc:
        raise FrontmatterError(_format_validation_error(exc), post_path) from exc

    return BlogPost(slug=post_path.stem, frontmatter=frontmatter, body=body, source_path=post_path)


def load_posts(directory: str | Path, include_drafts: bool = False) -> list[BlogPost]:
    """Load every post directly inside ``directory``, newest first.

    Ties on publish date are broken by slug. A missing directory yields an empty list.
    """
    root = Path(directory)
    if not root.is_dir():
        logger.warning("Posts directory %s does not exist", root)
        return []

    posts: dict[str, BlogPost] = {}
    for path in sorted(p for p in root.iterdir() if p.is_file() and is_post_file(p)):
        post = load_post(path)
        if post.slug in posts:
            raise ContentError(f"duplicate post slug {post.slug!r}", path)
        if post.draft and not include_drafts:
            logger.debug("Skipping draft %s", path.name)
            continue
        posts[post.slug] = post

    logger.info("Loaded %d post(s) from %s", len(posts), root)
    return sort_posts(posts.values())


def sort_posts(posts: Iterable[BlogPost]) -> list[BlogPost]:
    by_slug = sorted(posts, key=lambda p: p.slug)
    return sorted(by_slug, key=lambda p: p.publish_date, reverse=True)


def collect_tags(posts: Iterable[BlogPost]) -> list[tuple[str, int]]:
    """Count tag usage across ``posts``, most used first, then alphabetically."""
    counts = Counter(tag for post in posts for tag in post.tags)
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
