import sys
import pathlib
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))

import pytest

from library_registry import EMPTY_NOTICE, Registry


@pytest.fixture
def registry():
    reg = Registry()
    reg.add("Dune")
    reg.add("Emma")
    return reg


def test_add_prepends_available_copy(registry):
    ok, msg = registry.add("Ulysses")
    assert ok
    assert msg == "Book added: Ulysses"
    assert list(registry.list_books())[0] == ("Ulysses", "Available")
    assert registry.total_books == 3


def test_add_same_title_adds_one_more_available_entry(registry):
    before = [t for t, label in registry.list_books() if t == "Dune" and label == "Available"]
    registry.add("Dune")
    after = [t for t, label in registry.list_books() if t == "Dune" and label == "Available"]
    assert len(after) == len(before) + 1


def test_unknown_title_borrow_and_return_leave_registry_unchanged(registry):
    before = list(registry.list_books())
    ok, msg = registry.borrow("Missing")
    assert not ok
    assert msg == "Book is not available: Missing"
    ok, msg = registry.return_book("Missing")
    assert not ok
    assert msg == "Book not found or it wasn't borrowed: Missing"
    assert list(registry.list_books()) == before


def test_second_borrow_of_single_copy_fails(registry):
    assert registry.borrow("Dune")[0]
    assert ("Dune", "Borrowed") in list(registry.list_books())
    ok, msg = registry.borrow("Dune")
    assert not ok
    assert msg == "Book is not available: Dune"


def test_return_only_matches_borrowed_copy(registry):
    ok, _ = registry.return_book("Dune")
    assert not ok
    registry.borrow("Dune")
    ok, msg = registry.return_book("Dune")
    assert ok
    assert msg == "Book returned: Dune"
    assert ("Dune", "Available") in list(registry.list_books())


def test_borrow_skips_borrowed_copy_to_reach_older_one():
    reg = Registry()
    reg.add("Dune")
    reg.add("Dune")
    reg.borrow("Dune")
    assert reg.borrow("Dune")[0]
    assert list(reg.list_books()) == [("Dune", "Borrowed"), ("Dune", "Borrowed")]
    assert not reg.borrow("Dune")[0]


def test_remove_targets_most_recent_copy_first():
    reg = Registry()
    reg.add("Dune")
    reg.borrow("Dune")
    reg.add("Dune")
    assert reg.remove("Dune") == (True, "Book removed: Dune")
    assert list(reg.list_books()) == [("Dune", "Borrowed")]
    assert reg.remove("Dune")[0]
    assert len(reg) == 0


def test_remove_missing_title(registry):
    assert registry.remove("Missing") == (False, "Book not found: Missing")
    assert len(registry) == 2


def test_titles_are_case_sensitive(registry):
    assert not registry.borrow("dune")[0]
    assert not registry.remove("DUNE")[0]


def test_empty_title_is_a_valid_title():
    reg = Registry()
    reg.add("")
    assert list(reg.list_books()) == [("", "Available")]
    assert reg.borrow("")[0]
    assert reg.remove("")[0]


def test_list_books_is_a_fresh_traversal(registry):
    listing = registry.list_books()
    assert next(listing) == ("Emma", "Available")
    registry.borrow("Emma")
    assert list(registry.list_books()) == [("Emma", "Borrowed"), ("Dune", "Available")]


def test_display_lines():
    reg = Registry()
    assert reg.display_lines() == [EMPTY_NOTICE]
    assert list(reg.list_books()) == []
    reg.add("Dune")
    assert reg.display_lines() == ["Book: Dune, Status: Available"]


def test_to_frame_and_clear(registry):
    registry.borrow("Dune")
    df = registry.to_frame()
    assert list(df.columns) == ["Title", "Availability"]
    assert df["Title"].tolist() == ["Emma", "Dune"]
    assert df["Availability"].tolist() == ["Available", "Borrowed"]
    registry.clear()
    assert len(registry) == 0
    assert registry.to_frame().empty


def test_find_and_add_with_availability(registry):
    assert registry.find("Missing") is None
    registry.add("Dune", available=False)
    assert registry.find("Dune").available is False
    assert list(registry.list_books())[0] == ("Dune", "Borrowed")
