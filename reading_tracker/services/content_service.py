"""
Book segment content access
"""
import logging
from typing import Any, Dict, Optional

from ..core.exceptions import ResourceNotFoundException, ValidationException
from ..core.validators import to_number
from .base.firestore_service import FirestoreBaseService

logger = logging.getLogger(__name__)

SEGMENT_COLLECTION = "bookSegments"
DEFAULT_ESTIMATED_MINUTES = 15


def segment_doc_id(book_id: str, segment_index) -> str:
    return f"{book_id}_{segment_index}"


class ContentService(FirestoreBaseService):
    """Read-only access to the paragraphs written by the import script"""
    
    def __init__(self, db):
        super().__init__(db, SEGMENT_COLLECTION)
    
    async def get_segment(self, book_id: Optional[str], segment_index_raw: Optional[str]) -> Dict[str, Any]:
        if not book_id or not segment_index_raw:
            raise ValidationException("bookId and segmentIndex are required")
        
        try:
            segment_index = to_number(segment_index_raw, "segmentIndex")
        except ValidationException:
            segment_index = None
        if segment_index is None or segment_index <= 0:
            raise ValidationException("segmentIndex must be a number greater than 0")
        
        data = await self.get_document(
            segment_doc_id(book_id, segment_index),
            default_message="Failed to load segment text",
        )
        if data is None:
            raise ResourceNotFoundException(
                "Segment text not found",
                details={"bookId": book_id, "segmentIndex": segment_index},
            )
        
        return {
            "segment_index": segment_index,
            "title": data.get("title") or f"Part {segment_index}",
            "paragraphs": data.get("paragraphs") or [],
            "estimated_minutes": data.get("estimatedMinutes") or DEFAULT_ESTIMATED_MINUTES,
        }
