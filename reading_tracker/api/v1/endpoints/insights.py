"""
Insight (per-segment note) endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from ....core.exceptions import ValidationException
from ....core.firebase_config import get_db
from ....core.responses import success_response
from ....models.annotation import InsightCreate
from ....services.annotation_service import InsightService
from ..deps import get_current_user

router = APIRouter()


@router.post("")
async def save_insight(
    payload: InsightCreate,
    current_user_id: str = Depends(get_current_user),
    db=Depends(get_db),
):
    """Create or replace the note of a segment"""
    await InsightService(db).save_insight(current_user_id, payload)
    return success_response(message="Insight saved")


@router.get("")
async def get_insights(
    book_id: Optional[str] = Query(None, alias="bookId"),
    track_id: Optional[str] = Query(None, alias="trackId"),
    segment_index: Optional[str] = Query(None, alias="segmentIndex"),
    current_user_id: str = Depends(get_current_user),
    db=Depends(get_db),
):
    """
    With segmentIndex: the note of that segment (null if none).
    Without: every note of the book.
    """
    if not book_id:
        raise ValidationException("bookId is required")
    
    service = InsightService(db)
    if segment_index:
        note = await service.get_insight(current_user_id, book_id, segment_index, track_id)
        return success_response(note=note)
    
    items = await service.list_insights(current_user_id, book_id, track_id)
    return success_response(items=items)
