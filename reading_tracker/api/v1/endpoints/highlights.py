"""
Highlight endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from ....core.firebase_config import get_db
from ....core.responses import success_response
from ....models.annotation import HighlightCreate
from ....services.annotation_service import HighlightService
from ..deps import get_current_user

router = APIRouter()


@router.post("")
async def save_highlight(
    payload: HighlightCreate,
    current_user_id: str = Depends(get_current_user),
    db=Depends(get_db),
):
    """Save a user highlight"""
    highlight_id = await HighlightService(db).save_highlight(current_user_id, payload)
    return success_response(message="Highlight saved", highlightId=highlight_id)


@router.get("")
async def list_highlights(
    book_id: Optional[str] = Query(None, alias="bookId"),
    track_id: Optional[str] = Query(None, alias="trackId"),
    segment_index: Optional[str] = Query(None, alias="segmentIndex"),
    current_user_id: str = Depends(get_current_user),
    db=Depends(get_db),
):
    """List highlights, oldest first"""
    items = await HighlightService(db).list_highlights(current_user_id, book_id, track_id, segment_index)
    return success_response(count=len(items), items=items)
