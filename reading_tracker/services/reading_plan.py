"""
Reading plan generator

Splits a book's chapters into sessions and groups the sessions into weeks.
The plan is a pure function of the book and the cadence, so it is rebuilt on
every request instead of being stored.
"""
import math
import re
from typing import Any, Optional

from ..models.book import Book
from ..models.reading_plan import ReadingPlan, ReadingSession

CHAPTERS_PER_SESSION = 1
MIN_SESSIONS_PER_WEEK = 1
MAX_SESSIONS_PER_WEEK = 7


def clamp_sessions_per_week(raw: Optional[Any], default: int = 3) -> int:
    """
    Parse a sessions-per-week value coming from a query string.
    
    Unparseable, missing or zero values fall back to ``default``; the result is
    clamped to 1..7.
    """
    match = re.match(r"\s*([+-]?\d+)", str(raw)) if raw is not None else None
    value = int(match.group(1)) if match else 0
    if not value:
        value = default
    return max(MIN_SESSIONS_PER_WEEK, min(MAX_SESSIONS_PER_WEEK, value))


def build_reading_plan(
    book: Book,
    sessions_per_week: int,
    chapters_per_session: int = CHAPTERS_PER_SESSION,
) -> ReadingPlan:
    """
    Partition chapters 1..total_chapters into contiguous sessions.
    
    Args:
        book: Catalog book to plan
        sessions_per_week: Cadence, already clamped to 1..7
        chapters_per_session: Chapters read in one session
        
    Returns:
        ReadingPlan whose sessions tile the chapter range exactly once
    """
    total_sessions = math.ceil(book.total_chapters / chapters_per_session)
    total_weeks = math.ceil(total_sessions / sessions_per_week)

    sessions = []
    current_chapter = 1
    for s in range(1, total_sessions + 1):
        chapter_end = min(current_chapter + chapters_per_session - 1, book.total_chapters)
        sessions.append(ReadingSession(
            session_index=s,
            week_index=math.ceil(s / sessions_per_week),
            chapter_start=current_chapter,
            chapter_end=chapter_end,
        ))
        current_chapter = chapter_end + 1

    return ReadingPlan(
        book_id=book.id,
        total_chapters=book.total_chapters,
        sessions_per_week=sessions_per_week,
        total_weeks=total_weeks,
        sessions=sessions,
    )
