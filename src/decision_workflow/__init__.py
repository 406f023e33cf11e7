"""Decision Workflow.

Resumable, idempotent workflows expressed as a tree of yes/no decisions and
named entry points, persisted as a single state string:
- configuration loaded from `.env`
- structured logging
- in-memory and JSON-file stores
"""

__version__ = "0.1.0"

from decision_workflow.config import WorkflowSettings
from decision_workflow.storage import InMemoryStore, JsonFileStore, Store
from decision_workflow.workflow.actions import ALREADY_DONE, action
from decision_workflow.workflow.definition import DefinitionBuilder
from decision_workflow.workflow.engine import Workflow
from decision_workflow.workflow.errors import (
    DefinitionError,
    MethodNotDefinedError,
    WorkflowError,
    YesAndNoRequiredError,
)
from decision_workflow.workflow.interceptor import ExecutionContext
from decision_workflow.workflow.steps import Step, StepKind

__all__ = [
    "__version__",
    "ALREADY_DONE",
    "DefinitionBuilder",
    "DefinitionError",
    "ExecutionContext",
    "InMemoryStore",
    "JsonFileStore",
    "MethodNotDefinedError",
    "Step",
    "StepKind",
    "Store",
    "Workflow",
    "WorkflowError",
    "WorkflowSettings",
    "YesAndNoRequiredError",
    "action",
]
