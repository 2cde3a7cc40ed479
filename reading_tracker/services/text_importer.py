"""
Offline import of plain-text books into ``bookSegments``
"""
import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from firebase_admin import firestore

from ..models.book import BookLevel
from .content_service import DEFAULT_ESTIMATED_MINUTES, SEGMENT_COLLECTION, segment_doc_id

logger = logging.getLogger(__name__)

BOOK_COLLECTION = "books"
_BLANK_LINES = re.compile(r"\r?\n\r?\n+")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class ImportBookConfig:
    id: str
    title: str
    author: str
    level: BookLevel
    total_segments: int
    file_name: str


BOOKS_TO_IMPORT = (
    ImportBookConfig(
        id="little-women",
        title="Little Women",
        author="Louisa May Alcott",
        level=BookLevel.intermediate,
        total_segments=30,
        file_name="little_women.txt",
    ),
    ImportBookConfig(
        id="anne-of-green-gables",
        title="Anne of Green Gables",
        author="L. M. Montgomery",
        level=BookLevel.intermediate,
        total_segments=30,
        file_name="anne-of-green-gables.txt",
    ),
)


def split_into_paragraphs(raw: str) -> List[str]:
    """Split on blank lines and collapse whitespace inside each paragraph"""
    if not raw:
        return []
    paragraphs = (_WHITESPACE.sub(" ", chunk).strip() for chunk in _BLANK_LINES.split(raw))
    return [p for p in paragraphs if p]


def split_paragraphs_into_segments(paragraphs: List[str], total_segments: int) -> List[List[str]]:
    """
    Cut paragraphs into at most ``total_segments`` contiguous runs of
    ``ceil(len / total_segments)`` paragraphs; the last run may be shorter and
    fewer runs are produced when there are not enough paragraphs.
    """
    total = len(paragraphs)
    if total == 0 or total_segments <= 0:
        return []

    per_segment = math.ceil(total / total_segments)
    segments = []
    for i in range(total_segments):
        start = i * per_segment
        end = min(start + per_segment, total)
        if start >= end:
            break
        segments.append(paragraphs[start:end])
    return segments


def import_book(db, config: ImportBookConfig, texts_dir: Path) -> int:
    """
    Import one book file.
    
    Returns:
        Number of segments written, 0 when the book was skipped
    """
    file_path = Path(texts_dir) / config.file_name
    logger.info(f"Importing book {config.id} from {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        return 0

    paragraphs = split_into_paragraphs(file_path.read_text(encoding="utf-8"))
    logger.info(f"Total paragraphs: {len(paragraphs)}")

    segments = split_paragraphs_into_segments(paragraphs, config.total_segments)
    if not segments:
        logger.error(f"No segments created for {config.id}. Check the input text.")
        return 0

    db.collection(BOOK_COLLECTION).document(config.id).set(
        {
            "id": config.id,
            "title": config.title,
            "author": config.author,
            "level": config.level.value,
            "totalSegments": len(segments),
            "updatedAt": firestore.SERVER_TIMESTAMP,
            "createdAt": firestore.SERVER_TIMESTAMP,
        },
        merge=True,
    )

    batch = db.batch()
    for index, segment_paragraphs in enumerate(segments, start=1):
        batch.set(
            db.collection(SEGMENT_COLLECTION).document(segment_doc_id(config.id, index)),
            {
                "bookId": config.id,
                "segmentIndex": index,
                "title": f"Part {index}",
                "paragraphs": segment_paragraphs,
                "estimatedMinutes": DEFAULT_ESTIMATED_MINUTES,
                "updatedAt": firestore.SERVER_TIMESTAMP,
                "createdAt": firestore.SERVER_TIMESTAMP,
            },
            merge=True,
        )
    batch.commit()

    logger.info(f"Imported {len(segments)} segments for {config.id}")
    return len(segments)
