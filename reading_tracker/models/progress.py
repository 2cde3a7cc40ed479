"""
Progress tracking data models
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Any, Optional, Union


class CompletionCreate(BaseModel):
    """Body of POST /progress/complete; presence is validated by the service"""
    book_id: Optional[str] = None
    track_id: Optional[str] = None
    segment_index: Optional[Any] = None
    time_spent_minutes: Optional[Any] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ProgressSummary(BaseModel):
    book_id: str
    track_id: str
    total_chapters: int
    completed_count: int
    completion_rate: float
    last_completed_segment: Optional[Union[int, float]] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
