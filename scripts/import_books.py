#!/usr/bin/env python3
"""
Classics Reading Tracker - Book Text Import

Splits plain-text books into segments and writes them to Firestore
(``books`` and ``bookSegments``). Honors FIRESTORE_EMULATOR_HOST.

Usage:
    python scripts/import_books.py
    python scripts/import_books.py --texts-dir ./texts --book little-women
"""

import sys
import argparse
import logging
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from reading_tracker.core.config import settings
from reading_tracker.core.firebase_config import get_db, initialize_firebase
from reading_tracker.services.text_importer import BOOKS_TO_IMPORT, import_book


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Import plain-text books into Firestore segments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--texts-dir",
        type=Path,
        default=Path.cwd() / "texts",
        help="Directory holding the .txt files (default: ./texts)",
    )
    parser.add_argument(
        "--book",
        action="append",
        dest="books",
        help="Only import this book id (repeatable)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    configs = [c for c in BOOKS_TO_IMPORT if not args.books or c.id in args.books]
    if not configs:
        print(f"No matching books. Known ids: {', '.join(c.id for c in BOOKS_TO_IMPORT)}")
        return 1

    initialize_firebase()
    db = get_db()
    for config in configs:
        import_book(db, config, args.texts_dir)

    print("\nAll books imported.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
