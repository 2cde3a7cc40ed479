"""
Progress tracking service

Completion events are stored one document per (user, book, track, segment) in
``userProgress`` and rolled up per (user, day) in ``studyLogs``.
"""
import logging
import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from firebase_admin import firestore

from ..core.exceptions import ValidationException
from ..core.validators import leading_int, to_number
from ..models.progress import CompletionCreate, ProgressSummary
from .base.firestore_service import FirestoreBaseService

logger = logging.getLogger(__name__)

PROGRESS_COLLECTION = "userProgress"
STUDY_LOG_COLLECTION = "studyLogs"
STATUS_DONE = "done"

# Summary denominator is fixed, it is not read from the catalog
SUMMARY_TOTAL_CHAPTERS = 30

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso_timestamp(moment: datetime) -> str:
    """Millisecond precision, ``Z`` suffix"""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def progress_doc_id(uid: str, book_id: str, track_id: str, segment_index) -> str:
    return f"{uid}_{book_id}_{track_id}_{segment_index}"


def study_log_doc_id(uid: str, iso_date: str) -> str:
    return f"{uid}_{iso_date}"


def resolve_month(month: Optional[str], now: datetime) -> str:
    """Return ``YYYY-MM``; absent or malformed input means the current UTC month"""
    match = _MONTH_PATTERN.match(month or "")
    if match and 1 <= int(match.group(2)) <= 12:
        return f"{match.group(1)}-{int(match.group(2)):02d}"
    return now.strftime("%Y-%m")


def summarize_progress(
    book_id: str,
    track_id: str,
    records: Iterable[Dict[str, Any]],
    total_chapters: int = SUMMARY_TOTAL_CHAPTERS,
) -> ProgressSummary:
    """Derive completion statistics from the "done" records of one track"""
    completed_count = 0
    last_completed = None
    for record in records:
        completed_count += 1
        segment_index = record.get("segmentIndex")
        if isinstance(segment_index, (int, float)) and not isinstance(segment_index, bool):
            last_completed = segment_index if last_completed is None else max(last_completed, segment_index)

    return ProgressSummary(
        book_id=book_id,
        track_id=track_id,
        total_chapters=total_chapters,
        completed_count=completed_count,
        completion_rate=completed_count / total_chapters if total_chapters else 0,
        last_completed_segment=last_completed,
    )


class ProgressService:
    """Service for completion records and daily study logs"""
    
    def __init__(self, db, clock: Callable[[], datetime] = utc_now):
        self.progress = FirestoreBaseService(db, PROGRESS_COLLECTION)
        self.study_logs = FirestoreBaseService(db, STUDY_LOG_COLLECTION)
        self.clock = clock
    
    async def record_completion(self, uid: str, payload: CompletionCreate) -> Dict[str, Any]:
        """
        Mark a segment as done and add it to today's study log.
        
        The progress record and the study log are two separate writes. If the
        second one fails the record stays written and the log is not updated.
        
        Returns:
            ``date`` (UTC ``YYYY-MM-DD``) and the numeric ``segment_index``
        """
        if not payload.book_id or not payload.track_id or not payload.segment_index:
            raise ValidationException("bookId, trackId and segmentIndex are required")
        
        segment_index = leading_int(payload.segment_index, "segmentIndex")
        time_spent = to_number(payload.time_spent_minutes or 0, "timeSpentMinutes")
        now = self.clock()
        iso_date = now.strftime("%Y-%m-%d")
        
        await self.progress.set_document(
            progress_doc_id(uid, payload.book_id, payload.track_id, segment_index),
            {
                "uid": uid,
                "bookId": payload.book_id,
                "trackId": payload.track_id,
                "segmentIndex": segment_index,
                "status": STATUS_DONE,
                "completedAt": to_iso_timestamp(now),
                "timeSpentMinutes": time_spent,
            },
            merge=True,
            default_message="Failed to save progress",
        )
        
        await self.study_logs.set_document(
            study_log_doc_id(uid, iso_date),
            {
                "uid": uid,
                "date": iso_date,
                "updatedAt": firestore.SERVER_TIMESTAMP,
                "totalSegmentsCompleted": firestore.Increment(1),
                "totalStudyMinutes": firestore.Increment(time_spent),
            },
            merge=True,
            default_message="Failed to update study log",
        )
        
        logger.info(f"User {uid} completed {payload.book_id}/{payload.track_id} segment {segment_index}")
        return {"date": iso_date, "segment_index": segment_index}
    
    async def summarize(self, uid: str, book_id: Optional[str], track_id: Optional[str]) -> ProgressSummary:
        """Completion summary for one (book, track) of a user"""
        if not book_id or not track_id:
            raise ValidationException("bookId and trackId query parameters are required")
        
        records = await self.progress.query(
            [
                ("uid", "==", uid),
                ("bookId", "==", book_id),
                ("trackId", "==", track_id),
                ("status", "==", STATUS_DONE),
            ],
            default_message="Failed to load progress",
        )
        return summarize_progress(book_id, track_id, records)
    
    async def calendar_for_month(self, uid: str, month: Optional[str]) -> Dict[str, Any]:
        """
        Study logs of one month, ascending by date.
        
        The bounds ``-01``..``-31`` are compared as strings, which is safe for
        zero padded ISO dates whether or not the month has 31 days.
        """
        month_str = resolve_month(month, self.clock())
        items: List[Dict[str, Any]] = await self.study_logs.query(
            [
                ("uid", "==", uid),
                ("date", ">=", f"{month_str}-01"),
                ("date", "<=", f"{month_str}-31"),
            ],
            order_by="date",
            direction=firestore.Query.ASCENDING,
            default_message="Failed to load calendar data",
        )
        return {"month": month_str, "items": [_without_id(item) for item in items]}


def _without_id(item: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in item.items() if key != "id"}
