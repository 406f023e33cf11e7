from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from decision_workflow.storage.base import Store


class Notifier(Protocol):
    """Delivers a notification for a workflow.

    Delivery is expected to be idempotent per (store, reference); the engine
    calls ``deliver`` every time a procedure asks to notify. Returns a receipt
    for the audit trail, or ``None`` when nothing was sent.
    """

    def deliver(self, store: Store, reference: str) -> str | None: ...


class NullNotifier:
    def deliver(self, store: Store, reference: str) -> str | None:
        _ = (store, reference)
        return None
