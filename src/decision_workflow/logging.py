"""Structured logging configuration.

Uses standard library logging with a JSON formatter. Records emitted by a
workflow carry the workflow class and, inside a resumption point, its name;
the formatter lifts those and the action/decision being dispatched into
top-level fields so a trail of log lines can be filtered per workflow.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import MutableMapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from decision_workflow.workflow.engine import Workflow

WORKFLOW_FIELDS: tuple[str, ...] = ("workflow", "entry_point", "decision", "action")

_RESERVED_LOG_RECORD_ATTRS: set[str] = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}


class WorkflowLoggerAdapter(logging.LoggerAdapter[logging.Logger]):
    """Tag every record with the workflow it came from.

    Explicit ``extra`` values win over the workflow context.
    """

    def __init__(self, logger: logging.Logger, workflow: Workflow) -> None:
        super().__init__(logger, {})
        self.workflow = workflow

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        context: dict[str, object] = {"workflow": type(self.workflow).__name__}
        entry_point = self.workflow.current_entry_point
        if entry_point is not None:
            context["entry_point"] = entry_point
        kwargs["extra"] = {**context, **(kwargs.get("extra") or {})}
        return msg, kwargs


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_LOG_RECORD_ATTRS and not key.startswith("_")
        }
        for field in WORKFLOW_FIELDS:
            if field in extra:
                payload[field] = extra.pop(field)
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str) -> None:
    """Configure root logging with structured JSON output on stderr.

    Stdout is left to the CLI, which prints JSON documents there.
    """

    root = logging.getLogger()

    # Remove any existing handlers to avoid duplicate logs when re-configuring.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(JsonFormatter())

    root.addHandler(handler)
    root.setLevel(level.upper())
