"""Unit tests for the insertion-ordered set."""

from __future__ import annotations

from decision_workflow.workflow.ordered_set import OrderedSet


def test_keeps_first_insertion_order() -> None:
    items = OrderedSet(["review", "__start", "approve"])
    items.add("review")
    items.add("close")

    assert items.to_list() == ["review", "__start", "approve", "close"]
    assert len(items) == 4


def test_membership() -> None:
    items = OrderedSet(["__start"])

    assert "__start" in items
    assert "review" not in items


def test_equality_is_order_sensitive() -> None:
    assert OrderedSet(["a", "b"]) == OrderedSet(["a", "b", "a"])
    assert OrderedSet(["a", "b"]) != OrderedSet(["b", "a"])


def test_empty_set_is_falsy() -> None:
    assert not OrderedSet()
    assert OrderedSet(None).to_list() == []
