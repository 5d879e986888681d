#!/usr/bin/env python3
"""
library_records.py

Value types shared by the registry, the undo history and the borrow queue.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass

AVAILABLE_LABEL = "Available"
BORROWED_LABEL = "Borrowed"


class ActionKind(enum.Enum):
    """Kinds of mutating actions recorded in the undo history."""

    ADD = "add"
    REMOVE = "remove"
    BORROW = "borrow"
    RETURN = "return"


# What undoing each action would do, keyed on the recorded action.
INVERSE_DESCRIPTIONS = {
    ActionKind.ADD: "would remove {title}",
    ActionKind.REMOVE: "would add back {title}",
    ActionKind.BORROW: "would return {title}",
    ActionKind.RETURN: "would borrow {title}",
}


@dataclass
class BookRecord:
    """
    A single copy of a book held by the registry.

    Titles are matched exactly (case-sensitive) and are not required to be unique.
    """
    title: str
    available: bool = True

    @property
    def status_label(self) -> str:
        return AVAILABLE_LABEL if self.available else BORROWED_LABEL


@dataclass(frozen=True)
class HistoryRecord:
    """
    One entry of the undo history.

    `failed` marks a record pushed after a registry operation that did not
    change anything. `available` is the state of the copy a REMOVE took out.
    """
    action: ActionKind
    title: str
    failed: bool = False
    available: bool = True

    def describe_inverse(self) -> str:
        return INVERSE_DESCRIPTIONS[self.action].format(title=self.title)
