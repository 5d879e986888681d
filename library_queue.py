#!/usr/bin/env python3
"""
library_queue.py

FIFO queue of pending borrow requests.
"""

from __future__ import annotations
import logging
from collections import deque
from typing import Callable, Deque, Iterator, List, Optional, Tuple

logger = logging.getLogger("LibrarySystem.queue")

EMPTY_NOTICE = "No books in the borrow queue!"


class PendingQueue:
    """
    Borrow requests waiting to be processed, oldest first.

    Processing a request only reports it; book availability is left alone
    unless a `fulfil` callable is supplied to dequeue().
    """

    def __init__(self):
        self._titles: Deque[str] = deque()

    def __len__(self) -> int:
        return len(self._titles)

    def pending(self) -> Iterator[str]:
        return iter(list(self._titles))

    def enqueue(self, title: str) -> Tuple[bool, str]:
        self._titles.append(title)
        logger.info("Borrow request queued: %s", title)
        return True, f"Borrow request queued: {title}"

    def dequeue(self, fulfil: Optional[Callable[[str], Tuple[bool, str]]] = None) -> Tuple[bool, str]:
        """
        Take the oldest request off the queue and report it.

        Returns (False, message) when nothing is pending.
        """
        if not self._titles:
            logger.warning(EMPTY_NOTICE)
            return False, EMPTY_NOTICE
        title = self._titles.popleft()
        logger.info("Processing borrow request for book: %s", title)
        msg = f"Processing borrow request for book: {title}"
        if fulfil is not None:
            _, fulfil_msg = fulfil(title)
            msg = f"{msg}. {fulfil_msg}"
        return True, msg

    def drain(self) -> List[str]:
        messages = []
        while self._titles:
            _, msg = self.dequeue()
            messages.append(msg)
        return messages
