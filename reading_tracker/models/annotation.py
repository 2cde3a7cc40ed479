"""
Word, highlight and insight request models
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Any, Optional


class WordCreate(BaseModel):
    book_id: Optional[str] = None
    word: Optional[Any] = None
    track_id: Optional[str] = None
    segment_index: Optional[Any] = None
    context_text: Optional[Any] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class HighlightCreate(BaseModel):
    book_id: Optional[str] = None
    text: Optional[Any] = None
    track_id: Optional[str] = None
    segment_index: Optional[Any] = None
    color: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class InsightCreate(BaseModel):
    book_id: Optional[str] = None
    segment_index: Optional[Any] = None
    note: Optional[Any] = None
    track_id: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
