"""
Book catalog data models
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Tuple
from enum import Enum


class BookLevel(str, Enum):
    beginner = "Beginner"
    intermediate = "Intermediate"
    advanced = "Advanced"


class Book(BaseModel):
    id: str
    title: str
    author: str
    level: BookLevel
    total_chapters: int
    tags: Tuple[str, ...] = ()

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        use_enum_values = True
        frozen = True


class Chapter(BaseModel):
    """A numbered part of a book, derived from its chapter count"""
    id: str
    index: int
    title: str
    estimated_minutes: int = 15

    class Config:
        alias_generator = to_camel
        populate_by_name = True
