#!/usr/bin/env python3
"""
library_history.py

Undo history for mutating library actions.
"""

from __future__ import annotations
import logging
from typing import Callable, Iterator, List, Optional, Tuple

import pandas as pd

from library_records import ActionKind, HistoryRecord

logger = logging.getLogger("LibrarySystem.history")

EMPTY_NOTICE = "Nothing to undo!"


class History:
    """
    LIFO log of (action, title) records.

    Popping a record reports what undoing it would do. The registry is only
    touched if the caller passes an `apply` callable that performs the inverse.
    """

    def __init__(self):
        self._records: List[HistoryRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def push(self, action: ActionKind, title: str, failed: bool = False, available: bool = True) -> None:
        self._records.append(HistoryRecord(action=action, title=title, failed=failed, available=available))
        logger.debug("Recorded %s on %s", action.value, title)

    def peek(self) -> Optional[HistoryRecord]:
        if not self._records:
            return None
        return self._records[-1]

    def records(self) -> Iterator[HistoryRecord]:
        """Iterate records from the most recent to the oldest."""
        return reversed(list(self._records))

    def pop(self, apply: Optional[Callable[[HistoryRecord], Tuple[bool, str]]] = None) -> Tuple[bool, str]:
        """
        Remove the most recent record and describe its inverse action.

        Args:
            apply: optional callable that actually performs the inverse on the
                registry; its message is appended to the report.

        Returns (False, "Nothing to undo!") when the history is empty.
        """
        if not self._records:
            logger.warning(EMPTY_NOTICE)
            return False, EMPTY_NOTICE
        record = self._records.pop()
        inverse = record.describe_inverse()
        logger.info("Undoing last operation: %s on %s (%s)", record.action.value, record.title, inverse)
        msg = f"Undoing last operation: {record.action.value} on {record.title} ({inverse})"
        if apply is not None:
            _, applied_msg = apply(record)
            msg = f"{msg}. {applied_msg}"
        return True, msg

    def drain(self) -> List[str]:
        """
        Pop every record, most recent first, and return the reported messages.
        """
        messages = []
        while self._records:
            _, msg = self.pop()
            messages.append(msg)
        return messages

    def to_frame(self) -> pd.DataFrame:
        rows = [{"Action": r.action.value, "Title": r.title} for r in self.records()]
        return pd.DataFrame(rows, columns=["Action", "Title"])
