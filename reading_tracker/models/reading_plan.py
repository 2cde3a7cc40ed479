"""
Reading plan data models
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List


class ReadingSession(BaseModel):
    """One sitting of the plan, covering chapter_start..chapter_end inclusive"""
    session_index: int
    week_index: int
    chapter_start: int
    chapter_end: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ReadingPlan(BaseModel):
    book_id: str
    total_chapters: int
    sessions_per_week: int
    total_weeks: int
    sessions: List[ReadingSession]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
