"""
Static book catalog and chapter builder
"""
from typing import List, Optional, Sequence, Tuple

from ..core.exceptions import ResourceNotFoundException
from ..models.book import Book, BookLevel, Chapter

CHAPTER_ESTIMATED_MINUTES = 15

BOOKS: Tuple[Book, ...] = (
    Book(
        id="little-women",
        title="Little Women",
        author="Louisa May Alcott",
        level=BookLevel.intermediate,
        total_chapters=30,
        tags=("Classic", "Family", "Coming-of-age"),
    ),
    Book(
        id="anne-of-green-gables",
        title="Anne of Green Gables",
        author="L. M. Montgomery",
        level=BookLevel.intermediate,
        total_chapters=30,
        tags=("Classic", "Children", "School"),
    ),
)


def get_catalog() -> Sequence[Book]:
    """FastAPI dependency returning the read-only catalog"""
    return BOOKS


def lookup_book(catalog: Sequence[Book], book_id: Optional[str]) -> Optional[Book]:
    for book in catalog:
        if book.id == book_id:
            return book
    return None


def find_book(catalog: Sequence[Book], book_id: Optional[str]) -> Book:
    """
    Find a book by id
    
    Raises:
        ResourceNotFoundException: If the id is not in the catalog
    """
    book = lookup_book(catalog, book_id)
    if book is None:
        raise ResourceNotFoundException("Book not found")
    return book


def build_chapters(book: Book) -> List[Chapter]:
    """Number the book's chapters 1..total_chapters"""
    return [
        Chapter(
            id=f"{book.id}-ch-{i}",
            index=i,
            title=f"Part {i}",
            estimated_minutes=CHAPTER_ESTIMATED_MINUTES,
        )
        for i in range(1, book.total_chapters + 1)
    ]
