from urllib.parse import urlencode

from fastapi import APIRouter, Depends, HTTPException, Query

from portfolio.api.dependencies import get_store
from portfolio.api.pagination import DEFAULT_PAGE_SIZE, InvalidCursorError, clamp_page_size, paginate_posts
from portfolio.api.schemas import PageLinks, PostDetail, PostPage, PostSummary, TagCount
from portfolio.core.ports.store import ContentStore

router = APIRouter(tags=["posts"])


def _page_url(tag: str | None, size: int, after: str | None) -> str:
    params: dict[str, str | int] = {}
    if tag:
        params["tag"] = tag
    params["page[size]"] = size
    if after:
        params["page[after]"] = after
    return f"/posts?{urlencode(params)}"


@router.get("/posts", response_model=PostPage)
async def list_posts(
    tag: str | None = Query(None),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="page[size]"),
    page_after: str | None = Query(None, alias="page[after]"),
    store: ContentStore = Depends(get_store),
) -> PostPage:
    """Published posts, newest first, with cursor pagination."""
    size = clamp_page_size(page_size)
    posts = store.list_posts(tag=tag)
    try:
        page, next_cursor = paginate_posts(posts, size, after=page_after)
    except InvalidCursorError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return PostPage(
        data=[PostSummary.from_post(p) for p in page],
        links=PageLinks(
            self_link=_page_url(tag, size, page_after),
            next=_page_url(tag, size, next_cursor) if next_cursor else None,
        ),
    )


@router.get("/posts/{slug}", response_model=PostDetail)
async def get_post(slug: str, store: ContentStore = Depends(get_store)) -> PostDetail:
    post = store.get_post(slug)
    if post is None:
        raise HTTPException(status_code=404, detail=f"Post {slug!r} not found.")
    return PostDetail.from_post(post)


@router.get("/tags", response_model=list[TagCount])
async def tags(store: ContentStore = Depends(get_store)) -> list[TagCount]:
    return [TagCount(tag=t, count=c) for t, c in store.list_tags()]
