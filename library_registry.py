#!/usr/bin/env python3
"""
library_registry.py

The book registry: an ordered, in-memory collection of book copies.
"""

from __future__ import annotations
import logging
from typing import Iterator, List, Optional, Tuple

import pandas as pd

from library_records import BookRecord

logger = logging.getLogger("LibrarySystem.registry")

EMPTY_NOTICE = "No books in the library!"


class Registry:
    """
    Registry keeps every book copy in a plain list, most recently added first.

    All lookups are linear scans from the newest copy to the oldest one, so
    when several copies share a title the most recent matching copy is the one
    acted upon. Mutating operations never raise for a missing title; they
    return (success, message) where message is human-readable.
    """

    def __init__(self):
        self._books: List[BookRecord] = []

    def __len__(self) -> int:
        return len(self._books)

    @property
    def total_books(self) -> int:
        return len(self._books)

    # -------------- Internal helpers ----------------
    def _find_index(self, title: str, available: Optional[bool] = None) -> Optional[int]:
        """
        Return the index of the first copy matching `title`.

        When `available` is given the copy must also be in that availability state.
        """
        for idx, book in enumerate(self._books):
            if book.title != title:
                continue
            if available is None or book.available == available:
                return idx
        return None

    # ---------------- Core operations ----------------
    def find(self, title: str) -> Optional[BookRecord]:
        """
        Return the copy of `title` that remove() would act on, or None.
        """
        idx = self._find_index(title)
        if idx is None:
            return None
        return self._books[idx]

    def add(self, title: str, available: bool = True) -> Tuple[bool, str]:
        """
        Add a new copy of `title` at the front of the registry.

        Copies are available unless `available` says otherwise. Always succeeds.
        """
        self._books.insert(0, BookRecord(title=title, available=available))
        logger.info("Book added: %s", title)
        return True, f"Book added: {title}"

    def remove(self, title: str) -> Tuple[bool, str]:
        """
        Remove the most recently added copy of `title`, borrowed or not.

        Returns (False, message) and leaves the registry untouched if no copy exists.
        """
        idx = self._find_index(title)
        if idx is None:
            logger.warning("Book not found: %s", title)
            return False, f"Book not found: {title}"
        del self._books[idx]
        logger.info("Book removed: %s", title)
        return True, f"Book removed: {title}"

    def borrow(self, title: str) -> Tuple[bool, str]:
        """
        Mark the first available copy of `title` as borrowed.

        A missing title and a title whose copies are all out give the same message.
        """
        idx = self._find_index(title, available=True)
        if idx is None:
            logger.warning("Book is not available: %s", title)
            return False, f"Book is not available: {title}"
        self._books[idx].available = False
        logger.info("Book borrowed: %s", title)
        return True, f"Book borrowed: {title}"

    def return_book(self, title: str) -> Tuple[bool, str]:
        """
        Mark the first borrowed copy of `title` as available again.

        A missing title and a title with no borrowed copy give the same message.
        """
        idx = self._find_index(title, available=False)
        if idx is None:
            logger.warning("Book not found or it wasn't borrowed: %s", title)
            return False, f"Book not found or it wasn't borrowed: {title}"
        self._books[idx].available = True
        logger.info("Book returned: %s", title)
        return True, f"Book returned: {title}"

    def clear(self) -> None:
        count = len(self._books)
        self._books.clear()
        logger.info("Cleared %d books from the registry", count)

    # ---------------- Reports / Queries ----------------
    def list_books(self) -> Iterator[Tuple[str, str]]:
        """
        Yield (title, availability label) pairs in registry order.

        Every call starts a fresh traversal of the current contents.
        """
        for book in self._books:
            yield book.title, book.status_label

    def display_lines(self) -> List[str]:
        """
        Render the listing one line per copy, or a single notice when empty.
        """
        if not self._books:
            logger.info(EMPTY_NOTICE)
            return [EMPTY_NOTICE]
        return [f"Book: {title}, Status: {label}" for title, label in self.list_books()]

    def to_frame(self) -> pd.DataFrame:
        """
        Produce a DataFrame of the registry suitable for reporting.

        Columns are Title and Availability, rows in listing order.
        """
        return pd.DataFrame(list(self.list_books()), columns=["Title", "Availability"])
