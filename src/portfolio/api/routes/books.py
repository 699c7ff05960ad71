from collections import Counter

from fastapi import APIRouter, Depends, Query

from portfolio.api.dependencies import get_store
from portfolio.api.schemas import BookOut, BookSummary
from portfolio.core.ports.store import ContentStore
from portfolio.models import BookStatus

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=list[BookOut])
async def list_books(
    status: BookStatus | None = Query(None),
    store: ContentStore = Depends(get_store),
) -> list[BookOut]:
    return [BookOut.from_book(b) for b in store.list_books(status)]


@router.get("/summary", response_model=BookSummary)
async def summary(store: ContentStore = Depends(get_store)) -> BookSummary:
    """Number of books per reading status."""
    books = store.list_books()
    counts = Counter(b.status for b in books)
    return BookSummary(total=len(books), by_status={s.value: counts.get(s, 0) for s in BookStatus})
