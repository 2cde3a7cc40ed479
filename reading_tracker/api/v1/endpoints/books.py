"""
Book catalog, chapter and reading plan endpoints
"""
from typing import Optional, Sequence
from fastapi import APIRouter, Depends, Query

from ....core.config import settings
from ....core.responses import success_response
from ....models.book import Book
from ....services.catalog import build_chapters, find_book, get_catalog
from ....services.reading_plan import build_reading_plan, clamp_sessions_per_week

router = APIRouter()

DEFAULT_PLAN_BOOK_ID = "little-women"


@router.get("/books")
async def list_books(catalog: Sequence[Book] = Depends(get_catalog)):
    """List every book in the catalog"""
    return success_response(
        count=len(catalog),
        items=[book.model_dump(by_alias=True) for book in catalog],
    )


@router.get("/books/{book_id}/chapters")
async def get_book_chapters(book_id: str, catalog: Sequence[Book] = Depends(get_catalog)):
    """Get a book together with its numbered chapters"""
    book = find_book(catalog, book_id)
    return success_response(
        book=book.model_dump(by_alias=True),
        chapters=[chapter.model_dump(by_alias=True) for chapter in build_chapters(book)],
    )


@router.get("/reading-plan")
async def get_reading_plan(
    book_id: Optional[str] = Query(None, alias="bookId"),
    sessions_per_week: Optional[str] = Query(None, alias="sessionsPerWeek"),
    catalog: Sequence[Book] = Depends(get_catalog),
):
    """Split a book into weekly reading sessions"""
    book = find_book(catalog, book_id or DEFAULT_PLAN_BOOK_ID)
    cadence = clamp_sessions_per_week(sessions_per_week, default=settings.DEFAULT_SESSIONS_PER_WEEK)
    plan = build_reading_plan(book, cadence)
    return success_response(plan=plan.model_dump(by_alias=True))
