"""Error taxonomy for workflow definitions and execution.

Definition errors are raised while a workflow class statement executes and are
never retried. Cancellation is not an error and has no exception type.
"""

from __future__ import annotations


class WorkflowError(Exception):
    """Base class for all workflow errors."""


class DefinitionError(WorkflowError):
    """A workflow class was declared incorrectly."""


class MethodNotDefinedError(DefinitionError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Method, '{name}', is not defined")
        self.name = name


class YesAndNoRequiredError(DefinitionError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Decision '{name}' requires both a yes and a no procedure")
        self.name = name


class InvalidNameError(DefinitionError):
    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid workflow name {name!r}: {reason}")
        self.name = name


class UnknownActionError(WorkflowError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Action '{name}' is not registered on this workflow")
        self.name = name


class UnknownEntryPointError(WorkflowError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Entry point '{name}' is not defined on this workflow")
        self.name = name


class UnknownDecisionError(WorkflowError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Decision '{name}' is not defined on this workflow")
        self.name = name
