"""
Segment text endpoint
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from ....core.firebase_config import get_db
from ....core.responses import success_response
from ....services.content_service import ContentService

router = APIRouter()


@router.get("/content")
async def get_content(
    book_id: Optional[str] = Query(None, alias="bookId"),
    track_id: Optional[str] = Query(None, alias="trackId"),
    segment_index: Optional[str] = Query(None, alias="segmentIndex"),
    db=Depends(get_db),
):
    """Get the paragraphs of one imported segment"""
    segment = await ContentService(db).get_segment(book_id, segment_index)
    return success_response(
        bookId=book_id,
        trackId=track_id or None,
        segmentIndex=segment["segment_index"],
        title=segment["title"],
        paragraphs=segment["paragraphs"],
        estimatedMinutes=segment["estimated_minutes"],
    )
