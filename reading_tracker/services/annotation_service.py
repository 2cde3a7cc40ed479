"""
Saved words, highlights and per-segment insights
"""
import logging
from typing import Any, Dict, List, Optional

from firebase_admin import firestore

from ..core.exceptions import ValidationException
from ..core.validators import optional_number, to_number
from ..models.annotation import HighlightCreate, InsightCreate, WordCreate
from .base.firestore_service import FirestoreBaseService
from .progress_service import to_iso_timestamp, utc_now

logger = logging.getLogger(__name__)

WORD_COLLECTION = "userWords"
HIGHLIGHT_COLLECTION = "userHighlights"
INSIGHT_COLLECTION = "userInsights"

WORD_LIST_LIMIT = 200
HIGHLIGHT_LIST_LIMIT = 500
INSIGHT_LIST_LIMIT = 200
DEFAULT_HIGHLIGHT_COLOR = "yellow"
DEFAULT_TRACK_KEY = "default"


def normalize_word(word: Any) -> str:
    return str(word).strip().lower()


def word_doc_id(uid: str, book_id: str, normalized: str) -> str:
    return f"{uid}_{book_id}_{normalized}"


def insight_doc_id(uid: str, book_id: str, track_id: Optional[str], segment_index) -> str:
    return f"{uid}_{book_id}_{track_id or DEFAULT_TRACK_KEY}_{segment_index}"


class WordService(FirestoreBaseService):
    """Vocabulary saved while reading, one document per normalized word"""
    
    def __init__(self, db):
        super().__init__(db, WORD_COLLECTION)
    
    async def save_word(self, uid: str, payload: WordCreate) -> str:
        """
        Upsert a word and append the sentence it was picked from.
        
        Returns:
            The normalized word
        """
        if not payload.book_id or not payload.word:
            raise ValidationException("bookId and word are required")
        
        normalized = normalize_word(payload.word)
        if not normalized:
            raise ValidationException("Not a valid word")
        
        segment_index = optional_number(payload.segment_index, "segmentIndex")
        
        data: Dict[str, Any] = {
            "createdAt": firestore.SERVER_TIMESTAMP,
            "uid": uid,
            "bookId": payload.book_id,
            "trackId": payload.track_id or None,
            "normalized": normalized,
            "word": payload.word,
            "updatedAt": firestore.SERVER_TIMESTAMP,
        }
        if segment_index is not None:
            data["segmentIndex"] = segment_index
        if payload.context_text:
            # Entries carry their own timestamp, so identical sentences still accumulate
            data["contexts"] = firestore.ArrayUnion([{
                "text": str(payload.context_text),
                "createdAt": to_iso_timestamp(utc_now()),
            }])
        
        await self.set_document(
            word_doc_id(uid, payload.book_id, normalized),
            data,
            merge=True,
            default_message="Failed to save word",
        )
        return normalized
    
    async def list_words(self, uid: str, book_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Up to 200 words, unordered so no composite index is needed"""
        filters = [("uid", "==", uid)]
        if book_id:
            filters.append(("bookId", "==", book_id))
        return await self.query(filters, limit=WORD_LIST_LIMIT, default_message="Failed to load words")


class HighlightService(FirestoreBaseService):
    """Append-only text highlights"""
    
    def __init__(self, db):
        super().__init__(db, HIGHLIGHT_COLLECTION)
    
    async def save_highlight(self, uid: str, payload: HighlightCreate) -> str:
        """Create a new highlight and return its generated id"""
        if not payload.book_id or not payload.text:
            raise ValidationException("bookId and text are required")
        
        segment_index = optional_number(payload.segment_index, "segmentIndex")
        
        def build(highlight_id: str) -> Dict[str, Any]:
            return {
                "uid": uid,
                "bookId": payload.book_id,
                "trackId": payload.track_id or None,
                "segmentIndex": segment_index,
                "highlightId": highlight_id,
                "text": str(payload.text),
                "color": payload.color or DEFAULT_HIGHLIGHT_COLOR,
                "createdAt": firestore.SERVER_TIMESTAMP,
                "updatedAt": firestore.SERVER_TIMESTAMP,
            }
        
        return await self.add_document(build, default_message="Failed to save highlight")
    
    async def list_highlights(
        self,
        uid: str,
        book_id: Optional[str] = None,
        track_id: Optional[str] = None,
        segment_index_raw: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Highlights matching every given filter, oldest first"""
        filters = [("uid", "==", uid)]
        if book_id:
            filters.append(("bookId", "==", book_id))
        if track_id:
            filters.append(("trackId", "==", track_id))
        if segment_index_raw:
            filters.append(("segmentIndex", "==", to_number(segment_index_raw, "segmentIndex")))
        
        return await self.query(
            filters,
            order_by="createdAt",
            direction=firestore.Query.ASCENDING,
            limit=HIGHLIGHT_LIST_LIMIT,
            default_message="Failed to load highlights",
        )


class InsightService(FirestoreBaseService):
    """One free-text note per (user, book, track, segment)"""
    
    def __init__(self, db):
        super().__init__(db, INSIGHT_COLLECTION)
    
    async def save_insight(self, uid: str, payload: InsightCreate) -> None:
        if not payload.book_id or not payload.segment_index:
            raise ValidationException("bookId and segmentIndex are required")
        
        segment_index = to_number(payload.segment_index, "segmentIndex")
        if not payload.note or not str(payload.note).strip():
            raise ValidationException("note is empty")
        
        await self.set_document(
            insight_doc_id(uid, payload.book_id, payload.track_id, segment_index),
            {
                "uid": uid,
                "bookId": payload.book_id,
                "trackId": payload.track_id or None,
                "segmentIndex": segment_index,
                "note": str(payload.note),
                "updatedAt": firestore.SERVER_TIMESTAMP,
                "createdAt": firestore.SERVER_TIMESTAMP,
            },
            merge=True,
            default_message="Failed to save insight",
        )
    
    async def get_insight(
        self,
        uid: str,
        book_id: str,
        segment_index_raw: Any,
        track_id: Optional[str] = None,
    ) -> Optional[str]:
        """The stored note, or None when nothing was saved for the segment"""
        segment_index = to_number(segment_index_raw, "segmentIndex")
        data = await self.get_document(
            insight_doc_id(uid, book_id, track_id, segment_index),
            default_message="Failed to load insight",
        )
        if data is None:
            return None
        return data.get("note") or ""
    
    async def list_insights(self, uid: str, book_id: str, track_id: Optional[str] = None) -> List[Dict[str, Any]]:
        filters = [("uid", "==", uid), ("bookId", "==", book_id)]
        if track_id:
            filters.append(("trackId", "==", track_id))
        return await self.query(filters, limit=INSIGHT_LIST_LIMIT, default_message="Failed to load insights")
