"""Persistence port consumed by the workflow engine.

A store owns one persisted state string (and, optionally, the audit trail) for
a single business entity. The base class keeps everything in memory and does
no locking; real stores override :meth:`Store.exclusive` with a pessimistic
lock on the backing entity and may persist the audit trail.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decision_workflow.workflow.steps import Step


class Store:
    def __init__(self, state: str = "") -> None:
        self._state = state

    @property
    def state(self) -> str:
        """The raw persisted state, or an empty string for a fresh entity."""

        return self._state

    @state.setter
    def state(self, value: str) -> None:
        self.write_state(value)

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        """Hold exclusive access to the entity for the duration of the block.

        Implementations must block until the lock is free rather than fail
        fast, must release it on every exit path, and must be reentrant for the
        thread already holding it.
        """

        yield

    def write_state(self, value: str) -> None:
        self._state = value

    # Do nothing by default. Override to persist the audit trail.
    def store_steps(self, steps: list[Step]) -> None:
        _ = steps

    # Do nothing by default. Override to return a persisted audit trail.
    def fetch_steps(self) -> list[Step] | None:
        return None
