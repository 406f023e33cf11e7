from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .errors import YesAndNoRequiredError

if TYPE_CHECKING:
    from .interceptor import ExecutionContext

Procedure = Callable[["ExecutionContext"], object]


class BranchOptions:
    """Collects the yes and no procedures of a single decision.

    Both setters return the procedure so they can be used as decorators::

        branch = flow.decision("needs_review")

        @branch.yes
        def _(ctx): ...
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._yes: Procedure | None = None
        self._no: Procedure | None = None

    def yes(self, procedure: Procedure) -> Procedure:
        self._yes = procedure
        return procedure

    def no(self, procedure: Procedure) -> Procedure:
        self._no = procedure
        return procedure

    @property
    def complete(self) -> bool:
        return self._yes is not None and self._no is not None

    def options(self) -> tuple[Procedure, Procedure]:
        if self._yes is None or self._no is None:
            raise YesAndNoRequiredError(self.name)
        return self._yes, self._no
