"""Persisted workflow state.

A workflow persists a single string of the form::

    "entry_point/other_entry_point:method_call!/other_call!"

The left half lists the entry points reached, in the order first reached. The
right half lists the non-idempotent actions that have already fired, which must
never fire again for the lifetime of the persisted entity. Either half may be
empty; an empty string (or one with no ``:``) is a fresh workflow.

No escaping is defined, so names containing ``/`` or ``:`` are rejected when a
workflow is defined.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import InvalidNameError
from .ordered_set import OrderedSet

SECTION_SEPARATOR = ":"
ITEM_SEPARATOR = "/"
NONIDEMPOTENT_MARKER = "!"


def validate_name(name: str) -> str:
    """Return ``name`` if it can be stored in the state string."""

    if not name:
        raise InvalidNameError(name, "names must not be empty")
    for reserved in (SECTION_SEPARATOR, ITEM_SEPARATOR):
        if reserved in name:
            raise InvalidNameError(name, f"names must not contain {reserved!r}")
    return name


def _split(section: str) -> list[str]:
    return [item for item in section.split(ITEM_SEPARATOR) if item]


def decode(raw: str | None) -> tuple[OrderedSet, set[str]]:
    if not raw or SECTION_SEPARATOR not in raw:
        return OrderedSet(), set()
    entries_slug, _, calls_slug = raw.partition(SECTION_SEPARATOR)
    return OrderedSet(_split(entries_slug)), set(_split(calls_slug))


def encode(points: Iterable[str], actions: Iterable[str]) -> str:
    # Actions are unordered; sorting keeps the encoding stable across passes.
    return (
        ITEM_SEPARATOR.join(points)
        + SECTION_SEPARATOR
        + ITEM_SEPARATOR.join(sorted(actions))
    )


@dataclass(frozen=True, slots=True)
class WorkflowState:
    """Decoded view of a persisted state string.

    The collections are mutable so the engine can record progress in place;
    the dataclass itself is never rebound.
    """

    entry_points: OrderedSet = field(default_factory=OrderedSet)
    performed_actions: set[str] = field(default_factory=set)

    @staticmethod
    def decode(raw: str | None) -> WorkflowState:
        entry_points, performed_actions = decode(raw)
        return WorkflowState(entry_points=entry_points, performed_actions=performed_actions)

    def encode(self) -> str:
        return encode(self.entry_points, self.performed_actions)
