"""
Reading progress endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from ....core.firebase_config import get_db
from ....core.responses import success_response
from ....models.progress import CompletionCreate
from ....services.progress_service import ProgressService
from ..deps import get_current_user

router = APIRouter()


@router.post("/complete")
async def complete_segment(
    payload: CompletionCreate,
    current_user_id: str = Depends(get_current_user),
    db=Depends(get_db),
):
    """Mark a segment as completed and log the study time"""
    result = await ProgressService(db).record_completion(current_user_id, payload)
    return success_response(
        message="Completion saved",
        date=result["date"],
        segmentIndex=result["segment_index"],
    )


@router.get("/summary")
async def get_progress_summary(
    book_id: Optional[str] = Query(None, alias="bookId"),
    track_id: Optional[str] = Query(None, alias="trackId"),
    current_user_id: str = Depends(get_current_user),
    db=Depends(get_db),
):
    """Completion rate and last completed segment for a track"""
    summary = await ProgressService(db).summarize(current_user_id, book_id, track_id)
    return success_response(**summary.model_dump(by_alias=True))


@router.get("/calendar")
async def get_progress_calendar(
    month: Optional[str] = Query(None),
    current_user_id: str = Depends(get_current_user),
    db=Depends(get_db),
):
    """Daily study logs for a month (YYYY-MM, defaults to the current month)"""
    calendar = await ProgressService(db).calendar_for_month(current_user_id, month)
    return success_response(
        month=calendar["month"],
        count=len(calendar["items"]),
        items=calendar["items"],
    )
