"""Action registration.

Workflow methods that a procedure may invoke are tagged explicitly:

* ``@action`` marks an idempotent action. It runs every time it is invoked.
* ``@action(mutating=True)`` marks a non-idempotent action. It runs at most
  once across every instantiation of the workflow against one persisted
  entity. Its recorded name carries the ``!`` marker, e.g. ``send_email!``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar, overload

from .codec import NONIDEMPOTENT_MARKER, validate_name

F = TypeVar("F", bound=Callable[..., Any])

ACTION_ATTR = "__workflow_action__"


class _AlreadyDone(Enum):
    ALREADY_DONE = "already_done"

    def __repr__(self) -> str:
        return "ALREADY_DONE"


ALREADY_DONE = _AlreadyDone.ALREADY_DONE
"""Returned in place of a mutating action's result when it was skipped."""


def strip_marker(name: str) -> str:
    return name[: -len(NONIDEMPOTENT_MARKER)] if name.endswith(NONIDEMPOTENT_MARKER) else name


@dataclass(frozen=True, slots=True)
class ActionSpec:
    method_name: str
    mutating: bool
    recorded_name: str

    @property
    def lookup_names(self) -> tuple[str, ...]:
        names = {self.method_name, self.recorded_name, strip_marker(self.recorded_name)}
        return tuple(sorted(names))


def _build_spec(func: Callable[..., Any], *, mutating: bool, name: str | None) -> ActionSpec:
    base = strip_marker(name) if name else func.__name__
    recorded = base + NONIDEMPOTENT_MARKER if mutating else base
    return ActionSpec(
        method_name=func.__name__,
        mutating=mutating,
        recorded_name=validate_name(recorded),
    )


@overload
def action(func: F, /) -> F: ...


@overload
def action(*, mutating: bool = False, name: str | None = None) -> Callable[[F], F]: ...


def action(
    func: F | None = None, /, *, mutating: bool = False, name: str | None = None
) -> F | Callable[[F], F]:
    """Register a workflow method as an action."""

    def decorate(f: F) -> F:
        setattr(f, ACTION_ATTR, _build_spec(f, mutating=mutating, name=name))
        return f

    if func is not None:
        return decorate(func)
    return decorate
