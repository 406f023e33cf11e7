"""The capability object handed to yes, no and continuation procedures.

Procedures never receive the workflow itself. Every side effect goes through
an :class:`ExecutionContext`, which enforces the non-idempotency record and
the cancellation token of the enclosing exclusive-access scope.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .actions import ALREADY_DONE
from .steps import Step

if TYPE_CHECKING:
    from .engine import Workflow


class CancellationToken:
    """Cancellation flag for one exclusive-access scope."""

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class ExecutionContext:
    def __init__(self, workflow: Workflow, token: CancellationToken) -> None:
        self._workflow = workflow
        self._token = token

    @property
    def cancelled(self) -> bool:
        return self._token.cancelled

    def run(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        """Invoke a registered action.

        Mutating actions already recorded for this workflow are skipped and
        return ``ALREADY_DONE``. Otherwise the action runs and, if it is
        mutating, is recorded once it returns.
        """

        if self._token.cancelled:
            return None
        workflow = self._workflow
        spec = workflow.definition.action(name)
        method = getattr(workflow, spec.method_name)
        if not spec.mutating:
            return method(*args, **kwargs)

        recorded_name = spec.recorded_name
        if workflow.has_performed(recorded_name):
            workflow.record_step(Step.idempotent_call(recorded_name, skipped=True))
            workflow.logger.debug(
                "Skipping non-idempotent action", extra={"action": recorded_name}
            )
            return ALREADY_DONE

        workflow.record_step(Step.idempotent_call(recorded_name, skipped=False))
        result = method(*args, **kwargs)
        workflow.record_performed(recorded_name)
        workflow.logger.info("Performed non-idempotent action", extra={"action": recorded_name})
        return result

    def decide(self, name: str) -> bool | None:
        if self._token.cancelled:
            return None
        return self._workflow.dispatch_decision(name, self._token)

    def exit(self, final: Callable[[ExecutionContext], object] | None = None) -> bool:
        """Run ``final`` and abandon the rest of the current scope.

        Code after the scope (state persistence) still runs.
        """

        if self._token.cancelled:
            return False
        if final is not None:
            final(self)
        self._token.cancel()
        self._workflow.logger.debug("Workflow scope exited early")
        return False

    def notify(self, *references: str) -> None:
        if self._token.cancelled:
            return None
        self._workflow.notify(*references)
        return None

    def redirect_to(self, target: str) -> None:
        if self._token.cancelled:
            return None
        self._workflow.redirect_to(target)
        return None

    def finish(self) -> Any:
        return self.run("finish")
