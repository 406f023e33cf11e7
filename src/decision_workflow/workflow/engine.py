"""The resumable workflow engine.

Workflows are derived from :class:`Workflow`. A workflow persists just enough
state in its store to be instantiated repeatedly (and by several processes, one
at a time under the store's pessimistic lock) and to move into whatever state
the workflow now permits, without ever repeating a non-idempotent action.

Example::

    class ReviewWorkflow(Workflow):
        def always_true(self) -> bool:
            return True

        @action(mutating=True)
        def send_email(self) -> None:
            ...

        @classmethod
        def define(cls, flow: DefinitionBuilder) -> None:
            flow.decision(
                "always_true",
                yes=lambda ctx: ctx.run("send_email"),
                no=lambda ctx: ctx.exit(),
            )
            flow.start(lambda ctx: ctx.decide("always_true"))
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, ClassVar, Self

from decision_workflow.config import WorkflowSettings
from decision_workflow.logging import WorkflowLoggerAdapter
from decision_workflow.storage.base import Store
from decision_workflow.storage.memory import InMemoryStore

from .actions import action
from .codec import WorkflowState
from .definition import WRAPPED_ATTR, DefinitionBuilder, WorkflowDefinition
from .errors import UnknownEntryPointError
from .interceptor import CancellationToken, ExecutionContext
from .notifications import Notifier, NullNotifier
from .steps import Step

FINISH_ACTION = "finish!"


def _decision_method(name: str, condition: Callable[..., object]) -> Callable[..., Any]:
    def method(self: Workflow) -> bool | None:
        return self.decide(name)

    functools.update_wrapper(method, condition)
    setattr(method, WRAPPED_ATTR, condition)
    return method


def _entry_method(name: str, base: Callable[..., object]) -> Callable[..., Any]:
    def method(self: Workflow) -> Workflow:
        return self.enter(name)

    functools.update_wrapper(method, base)
    setattr(method, WRAPPED_ATTR, base)
    return method


class Workflow:
    """Base class for resumable, idempotent workflows.

    Constructing a workflow runs one resumption pass under the store's
    exclusive-access scope: the root entry point on a fresh workflow, or every
    previously recorded entry point in the order first reached. State is
    written back when the pass ends, including when a procedure exits early.
    """

    definition: ClassVar[WorkflowDefinition]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        builder = DefinitionBuilder(cls)
        cls.define(builder)
        definition = builder.build()
        cls.definition = definition

        for name, decision in definition.decisions.items():
            setattr(cls, name, _decision_method(name, decision.condition))
        for name, entry in definition.entry_points.items():
            setattr(cls, name, _entry_method(name, entry.base))

    @classmethod
    def define(cls, flow: DefinitionBuilder) -> None:
        """Register decisions and entry points. Override in subclasses."""

    def __init__(
        self,
        store: Store | None = None,
        *,
        settings: WorkflowSettings | None = None,
        notifier: Notifier | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store if store is not None else InMemoryStore()
        self.settings = settings if settings is not None else WorkflowSettings()
        self.notifier = notifier if notifier is not None else NullNotifier()
        self.logger = WorkflowLoggerAdapter(
            logger if logger is not None else logging.getLogger(__name__), self
        )

        self.steps: list[Step] = []
        self.notifications: list[str] = []
        self.redirect: str | None = None
        self._scopes: list[CancellationToken] = []
        self._entered: list[str] = []

        self._state = self._load_state()
        if self.finished:
            self.steps = list(self.store.fetch_steps() or [])
            return

        # Pessimistic locking: this blocks until the store grants exclusive access.
        self._run_scope(self._resume)

    # State
    # ---------------------------------------------------------------------------
    def _log_state(self, message: str, raw: str | None) -> None:
        level = logging.INFO if self.settings.log_state_transitions else logging.DEBUG
        self.logger.log(level, message, extra={"state": raw})

    def _load_state(self) -> WorkflowState:
        raw = self.store.state
        self._log_state("Loaded workflow state", raw)
        return WorkflowState.decode(raw)

    def _refresh_state(self) -> None:
        stored = WorkflowState.decode(self.store.state)
        for name in self._state.entry_points:
            stored.entry_points.add(name)
        stored.performed_actions.update(self._state.performed_actions)
        self._state = stored
        self.logger.debug("Refreshed workflow state", extra={"state": self._state.encode()})

    def _persist_state(self) -> None:
        slug = self._state.encode()
        self.store.write_state(slug)
        self.store.store_steps(list(self.steps))
        self._log_state("Persisted workflow state", slug)

    @property
    def current_entry_point(self) -> str | None:
        return self._entered[-1] if self._entered else None

    @property
    def state(self) -> str:
        """The current encoded state string."""

        return self._state.encode()

    @property
    def entry_points(self) -> list[str]:
        return self._state.entry_points.to_list()

    @property
    def performed_actions(self) -> frozenset[str]:
        return frozenset(self._state.performed_actions)

    @property
    def finished(self) -> bool:
        return FINISH_ACTION in self._state.performed_actions

    def has_performed(self, recorded_name: str) -> bool:
        return recorded_name in self._state.performed_actions

    def record_performed(self, recorded_name: str) -> None:
        self._state.performed_actions.add(recorded_name)

    def record_step(self, step: Step) -> None:
        self.steps.append(step)

    # Scopes
    # ---------------------------------------------------------------------------
    def _run_scope(self, body: Callable[[CancellationToken], object]) -> None:
        with self.store.exclusive():
            # Another instance may have advanced the state since it was last read.
            self._refresh_state()
            if self.finished:
                return

            token = CancellationToken()
            self._scopes.append(token)
            try:
                body(token)
            finally:
                self._scopes.pop()
                self._persist_state()

    def _resume(self, _token: CancellationToken) -> None:
        if not self._state.entry_points:
            if self.definition.root is None:
                self.logger.warning("Workflow has no start procedure")
                return
            self.enter(self.definition.root)
            return

        for name in self._state.entry_points.to_list():
            if name not in self.definition.entry_points:
                if not self.settings.skip_unknown_entry_points:
                    raise UnknownEntryPointError(name)
                self.logger.warning(
                    "Skipping entry point no longer defined on workflow",
                    extra={"entry_point": name},
                )
                continue
            self.enter(name)

    # Dispatch
    # ---------------------------------------------------------------------------
    def enter(self, name: str) -> Self:
        """Resume the workflow at entry point ``name``.

        Entering a recorded entry point again is allowed; its continuation
        re-runs with already performed actions suppressed.
        """

        entry = self.definition.entry_point(name)
        if self.finished:
            return self

        def body(token: CancellationToken) -> None:
            self._state.entry_points.add(name)
            self.record_step(Step.entry_point(name))
            self._entered.append(name)
            try:
                entry.base(self)
                entry.continuation(ExecutionContext(self, token))
            finally:
                self._entered.pop()

        self._run_scope(body)
        return self

    def decide(self, name: str) -> bool | None:
        """Evaluate decision ``name`` and run the matching branch.

        Outside any scope a fresh exclusive-access scope is opened for it.
        """

        if self.finished:
            return None
        if self._scopes:
            return self.dispatch_decision(name, self._scopes[-1])

        outcome: bool | None = None

        def body(token: CancellationToken) -> None:
            nonlocal outcome
            outcome = self.dispatch_decision(name, token)

        self._run_scope(body)
        return outcome

    def dispatch_decision(self, name: str, token: CancellationToken) -> bool | None:
        decision = self.definition.decision(name)
        if self.finished:
            return None

        result = bool(decision.condition(self))
        self.record_step(Step.decision(name, result))
        self.logger.debug("Decision evaluated", extra={"decision": name, "result": result})
        procedure = decision.yes if result else decision.no
        procedure(ExecutionContext(self, token))
        return result

    # Side effects available to procedures
    # ---------------------------------------------------------------------------
    def notify(self, *references: str) -> None:
        receipts: list[str] = []
        for reference in references:
            receipt = self.notifier.deliver(self.store, reference)
            self.notifications.append(reference)
            if receipt is not None:
                receipts.append(receipt)
        self.record_step(Step.notification(receipts))

    def redirect_to(self, target: str) -> None:
        self.redirect = target
        self.record_step(Step.redirect(target))

    @property
    def has_redirect(self) -> bool:
        return bool(self.redirect)

    @action(mutating=True)
    def finish(self) -> None:
        """Mark the workflow as finished.

        Once recorded, every decision and entry point becomes a no-op and new
        instances load the audit trail from the store instead of resuming.
        Overrides must keep the ``@action(mutating=True)`` decorator.
        """


Workflow.definition = DefinitionBuilder(Workflow).build()
