"""Resumable, idempotent workflow engine.

Workflows subclass :class:`decision_workflow.workflow.engine.Workflow` and
register their decisions and entry points in ``define``. Mutating actions fire
at most once per persisted entity, however often the workflow is re-instantiated.
"""

__all__: list[str] = []
