"""JSON-file store.

The document keeps the state string together with the audit trail of the
last resumption pass, so a finished workflow can still show how it got there.

Locking is per resolved path within one process. Multiple processes sharing a
file need an external lock.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from decision_workflow.workflow.steps import Step

from .base import Store

logger = logging.getLogger(__name__)

_LOCKS: dict[Path, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = path.resolve()
    with _LOCKS_GUARD:
        lock = _LOCKS.get(key)
        if lock is None:
            lock = threading.RLock()
            _LOCKS[key] = lock
        return lock


def _utc_iso_now() -> str:
    return datetime.now(tz=UTC).isoformat()


class StoreDocument(BaseModel):
    state: str = ""
    steps: list[dict[str, Any]] = Field(default_factory=list)
    updated_at: str | None = None


class JsonFileStore(Store):
    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self._lock = _lock_for(path)

    def _load_unlocked(self) -> StoreDocument:
        if not self.path.exists():
            return StoreDocument()
        return StoreDocument.model_validate_json(self.path.read_text(encoding="utf-8"))

    def _save_unlocked(self, document: StoreDocument) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(document.model_dump(mode="json"), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )

    def _update(self, **updates: object) -> None:
        with self._lock:
            document = self._load_unlocked()
            self._save_unlocked(
                document.model_copy(update={"updated_at": _utc_iso_now(), **updates})
            )

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        with self._lock:
            yield

    @property
    def state(self) -> str:
        with self._lock:
            return self._load_unlocked().state

    @state.setter
    def state(self, value: str) -> None:
        self.write_state(value)

    def write_state(self, value: str) -> None:
        self._update(state=value)
        logger.debug("Wrote workflow state", extra={"path": str(self.path)})

    def store_steps(self, steps: list[Step]) -> None:
        self._update(steps=[step.to_json() for step in steps])

    def fetch_steps(self) -> list[Step] | None:
        with self._lock:
            raw_steps = self._load_unlocked().steps
        return [Step.from_json(raw) for raw in raw_steps]
