"""
Saved word endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from ....core.firebase_config import get_db
from ....core.responses import success_response
from ....models.annotation import WordCreate
from ....services.annotation_service import WordService
from ..deps import get_current_user

router = APIRouter()


@router.post("")
async def save_word(
    payload: WordCreate,
    current_user_id: str = Depends(get_current_user),
    db=Depends(get_db),
):
    """Save a word picked while reading"""
    normalized = await WordService(db).save_word(current_user_id, payload)
    return success_response(message="Word saved", word=normalized)


@router.get("")
async def list_words(
    book_id: Optional[str] = Query(None, alias="bookId"),
    current_user_id: str = Depends(get_current_user),
    db=Depends(get_db),
):
    """List saved words, optionally for one book"""
    items = await WordService(db).list_words(current_user_id, book_id)
    return success_response(count=len(items), items=items)
