#!/usr/bin/env python3
"""
library_system.py
"""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple

import pandas as pd

from library_history import History
from library_queue import PendingQueue
from library_records import ActionKind, HistoryRecord
from library_registry import Registry

# Configuration
APPLY_UNDO = False
FULFIL_REQUESTS = False
RECORD_FAILED_ACTIONS = True

# Logging
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger("LibrarySystem")


class LibrarySystem:
    """
    LibrarySystem ties together the book registry, the undo history and the
    borrow-request queue, and exposes one method per user command.

    Registry mutations (add, return, remove) are followed by a matching history
    push. Borrow commands are only queued. Undo and queue processing report
    what they would do; the `apply_undo` and `fulfil_requests` switches make
    them act on the registry instead.
    """

    def __init__(self,
                 apply_undo: bool = APPLY_UNDO,
                 fulfil_requests: bool = FULFIL_REQUESTS,
                 record_failed_actions: bool = RECORD_FAILED_ACTIONS):
        """
        Initialize an empty LibrarySystem.

        Args:
            apply_undo: apply the inverse of an undone action to the registry.
            fulfil_requests: borrow the book when its queued request is processed.
            record_failed_actions: push history records for return/remove even
                when the registry operation failed.
        """
        self.registry = Registry()
        self.history = History()
        self.queue = PendingQueue()

        self.apply_undo = bool(apply_undo)
        self.fulfil_requests = bool(fulfil_requests)
        self.record_failed_actions = bool(record_failed_actions)

    # -------------- Internal helpers ----------------
    def _record(self, action: ActionKind, ok: bool, title: str, available: bool = True) -> None:
        """
        Push a history record for a registry mutation that has just run.

        Records for failed mutations are marked so undo never replays them.
        """
        if not ok:
            if not self.record_failed_actions:
                return
            logger.warning("Recording %s on %s although the operation failed", action.value, title)
        self.history.push(action, title, failed=not ok, available=available)

    def _apply_inverse(self, record: HistoryRecord) -> Tuple[bool, str]:
        """
        Perform the inverse of `record` on the registry without recording it.
        """
        if record.failed:
            logger.warning("Skipping undo of failed %s on %s", record.action.value, record.title)
            return False, f"Nothing to revert: {record.action.value} on {record.title} had failed"
        if record.action is ActionKind.ADD:
            return self.registry.remove(record.title)
        if record.action is ActionKind.REMOVE:
            return self.registry.add(record.title, available=record.available)
        if record.action is ActionKind.BORROW:
            return self.registry.return_book(record.title)
        return self.registry.borrow(record.title)

    def _fulfil(self, title: str) -> Tuple[bool, str]:
        ok, msg = self.registry.borrow(title)
        if ok:
            self.history.push(ActionKind.BORROW, title)
        return ok, msg

    # ---------------- Commands ----------------
    def add_book(self, title: str) -> Tuple[bool, str]:
        ok, msg = self.registry.add(title)
        self._record(ActionKind.ADD, ok, title)
        return ok, msg

    def borrow_book(self, title: str) -> Tuple[bool, str]:
        """
        Queue a borrow request for `title`; availability changes only when processed.
        """
        return self.queue.enqueue(title)

    def return_book(self, title: str) -> Tuple[bool, str]:
        ok, msg = self.registry.return_book(title)
        self._record(ActionKind.RETURN, ok, title)
        return ok, msg

    def remove_book(self, title: str) -> Tuple[bool, str]:
        book = self.registry.find(title)
        available = book.available if book is not None else True
        ok, msg = self.registry.remove(title)
        self._record(ActionKind.REMOVE, ok, title, available=available)
        return ok, msg

    def list_books(self) -> List[str]:
        return self.registry.display_lines()

    def undo(self) -> Tuple[bool, str]:
        """
        Undo the most recent recorded action.

        Returns (success, message); the message names the inverse action.
        """
        return self.history.pop(apply=self._apply_inverse if self.apply_undo else None)

    def process_queue(self) -> Tuple[bool, str]:
        return self.queue.dequeue(fulfil=self._fulfil if self.fulfil_requests else None)

    # ---------------- Reports / Teardown ----------------
    def export_report_books(self) -> pd.DataFrame:
        """
        Produce a DataFrame of the current inventory with human-friendly Availability values.
        """
        return self.registry.to_frame()

    def shutdown(self) -> List[str]:
        """
        Release all state: drain the history, then the queue, then clear the registry.

        Returns every message reported while draining, in order.
        """
        messages = self.history.drain()
        messages.extend(self.queue.drain())
        self.registry.clear()
        logger.info("Library system shut down")
        return messages


# ---------------- CLI ----------------
def input_prompt(prompt: str, strip: bool = True) -> Optional[str]:
    """
    Wrapper around built-in input() that handles interrupts.

    Returns the line (stripped unless `strip` is False), or None on EOF/KeyboardInterrupt.
    """
    try:
        line = input(prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        return None
    return line.strip() if strip else line


def print_menu():
    print("\n----Library Management System----\n")
    print("1. Add a book")
    print("2. Borrow a book")
    print("3. Return a book")
    print("4. Remove a book")
    print("5. Display all books")
    print("6. Undo last operation")
    print("7. Process borrow queue")
    print("8. Exit")
    print("9. Export inventory report")


def cli_loop(lib: LibrarySystem):
    """
    Interactive command-loop for the library system.

    Presents a text menu, accepts user input and invokes `LibrarySystem` methods.
    Titles are taken verbatim. Choice 8 or EOF exits the loop.
    """
    title_commands = {
        "1": ("add", lib.add_book),
        "2": ("borrow", lib.borrow_book),
        "3": ("return", lib.return_book),
        "4": ("remove", lib.remove_book),
    }
    while True:
        print_menu()
        choice = input_prompt("Enter your choice: ")
        if choice is None or choice == "8":
            print("Exiting the program.")
            break
        elif choice in title_commands:
            verb, command = title_commands[choice]
            title = input_prompt(f"Enter book title to {verb}: ", strip=False)
            if title is None:
                print("Exiting the program.")
                break
            _, msg = command(title)
            print(msg)
        elif choice == "5":
            for line in lib.list_books():
                print(line)
        elif choice == "6":
            _, msg = lib.undo()
            print(msg)
        elif choice == "7":
            _, msg = lib.process_queue()
            print(msg)
        elif choice == "9":
            report = lib.export_report_books()
            print(f"\nTotal books: {len(report)}")
            if not report.empty:
                print(report.to_string(index=False))
        else:
            print("Invalid choice, please try again.")


def demo_run():
    """
    Start an interactive session on an empty library and report pending state on exit.
    """
    lib = LibrarySystem()
    cli_loop(lib)
    for msg in lib.shutdown():
        print(msg)
    print("Goodbye.")


if __name__ == "__main__":
    demo_run()
