"""Immutable decision, entry-point and action tables.

A table is built once per workflow class, while its class statement executes,
from the registrations made in ``Workflow.define``. Any registration error is
raised at that point, before an instance can exist.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .actions import ACTION_ATTR, ActionSpec, strip_marker
from .codec import validate_name
from .errors import (
    MethodNotDefinedError,
    UnknownActionError,
    UnknownDecisionError,
    UnknownEntryPointError,
)
from .options import BranchOptions, Procedure

if TYPE_CHECKING:
    from .engine import Workflow

ROOT_ENTRY_POINT = "__start"

WRAPPED_ATTR = "__workflow_wrapped__"


def _noop(_ctx: object) -> None:
    return None


def _root_method(_workflow: object) -> None:
    return None


@dataclass(frozen=True, slots=True)
class Decision:
    name: str
    condition: Callable[[Workflow], object]
    yes: Procedure
    no: Procedure


@dataclass(frozen=True, slots=True)
class EntryPoint:
    name: str
    base: Callable[[Workflow], object]
    continuation: Procedure


@dataclass(frozen=True, slots=True)
class WorkflowDefinition:
    decisions: Mapping[str, Decision]
    entry_points: Mapping[str, EntryPoint]
    actions: Mapping[str, ActionSpec]
    root: str | None = None

    def decision(self, name: str) -> Decision:
        try:
            return self.decisions[name]
        except KeyError:
            raise UnknownDecisionError(name) from None

    def entry_point(self, name: str) -> EntryPoint:
        try:
            return self.entry_points[name]
        except KeyError:
            raise UnknownEntryPointError(name) from None

    def action(self, name: str) -> ActionSpec:
        spec = self.actions.get(name) or self.actions.get(strip_marker(name))
        if spec is None:
            raise UnknownActionError(name)
        return spec


def _collect_actions(workflow_cls: type) -> dict[str, ActionSpec]:
    actions: dict[str, ActionSpec] = {}
    for attr in dir(workflow_cls):
        spec = getattr(getattr(workflow_cls, attr, None), ACTION_ATTR, None)
        if isinstance(spec, ActionSpec):
            for name in spec.lookup_names:
                actions[name] = spec
    return actions


class DefinitionBuilder:
    """Registration surface passed to ``Workflow.define``."""

    def __init__(self, workflow_cls: type) -> None:
        self._cls = workflow_cls
        self._branches: dict[str, BranchOptions] = {}
        self._conditions: dict[str, Callable[..., object]] = {}
        self._entry_points: dict[str, EntryPoint] = {}
        self._root: str | None = None

    def _existing_method(self, name: str) -> Callable[..., Any]:
        method = getattr(self._cls, name, None)
        if not callable(method):
            raise MethodNotDefinedError(name)
        # A parent class may already have replaced the method with a dispatcher.
        return getattr(method, WRAPPED_ATTR, method)

    def decision(
        self,
        name: str,
        yes: Procedure | None = None,
        no: Procedure | None = None,
    ) -> BranchOptions:
        """Register the existing method ``name`` as a yes/no decision."""

        condition = self._existing_method(name)
        branch = BranchOptions(name)
        if yes is not None:
            branch.yes(yes)
        if no is not None:
            branch.no(no)
        self._conditions[name] = condition
        self._branches[name] = branch
        return branch

    def entry(self, name: str, continuation: Procedure | None = None) -> None:
        """Register the existing method ``name`` as a resumption point."""

        base = self._existing_method(name)
        validate_name(name)
        self._entry_points[name] = EntryPoint(
            name=name, base=base, continuation=continuation or _noop
        )

    def start(self, continuation: Procedure) -> None:
        self._entry_points[ROOT_ENTRY_POINT] = EntryPoint(
            name=ROOT_ENTRY_POINT, base=_root_method, continuation=continuation
        )
        self._root = ROOT_ENTRY_POINT

    def build(self) -> WorkflowDefinition:
        decisions: dict[str, Decision] = {}
        for name, branch in self._branches.items():
            yes, no = branch.options()
            decisions[name] = Decision(
                name=name, condition=self._conditions[name], yes=yes, no=no
            )
        return WorkflowDefinition(
            decisions=MappingProxyType(decisions),
            entry_points=MappingProxyType(dict(self._entry_points)),
            actions=MappingProxyType(_collect_actions(self._cls)),
            root=self._root,
        )
