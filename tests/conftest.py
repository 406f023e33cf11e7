"""Test configuration and fixtures."""

from pathlib import Path

import pytest

from decision_workflow.config import WorkflowSettings
from decision_workflow.storage.json_file import JsonFileStore
from decision_workflow.storage.memory import InMemoryStore


@pytest.fixture
def settings() -> WorkflowSettings:
    """Provide settings isolated from any local `.env` file."""
    return WorkflowSettings(_env_file=None)


@pytest.fixture
def store() -> InMemoryStore:
    """Provide a fresh in-memory store."""
    return InMemoryStore()


@pytest.fixture
def json_store(tmp_path: Path) -> JsonFileStore:
    """Provide a JSON-file store in a temporary directory."""
    return JsonFileStore(tmp_path / "workflow" / "state.json")


@pytest.fixture
def calls() -> list[str]:
    """Collect the names of workflow methods as they are invoked."""
    return []
