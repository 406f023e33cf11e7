"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from decision_workflow.config import WorkflowSettings

_ENV_VARS = (
    "DECISION_WORKFLOW_LOG_LEVEL",
    "DECISION_WORKFLOW_SKIP_UNKNOWN_ENTRY_POINTS",
    "DECISION_WORKFLOW_STATE_PATH",
    "DECISION_WORKFLOW_LOG_STATE_TRANSITIONS",
)


@pytest.fixture(autouse=True)
def _clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_settings_defaults() -> None:
    settings = WorkflowSettings()

    assert settings.log_level == "INFO"
    assert settings.skip_unknown_entry_points is True
    assert settings.state_path == Path("workflow_state.json")
    assert settings.log_state_transitions is True


def test_settings_loads_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "DECISION_WORKFLOW_LOG_LEVEL=debug",
                "DECISION_WORKFLOW_SKIP_UNKNOWN_ENTRY_POINTS=false",
                "DECISION_WORKFLOW_STATE_PATH=state/change-42.json",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = WorkflowSettings()

    assert settings.log_level == "DEBUG"
    assert settings.skip_unknown_entry_points is False
    assert settings.state_path == Path("state/change-42.json")


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DECISION_WORKFLOW_LOG_STATE_TRANSITIONS", "0")

    assert WorkflowSettings().log_state_transitions is False


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(ValidationError):
        WorkflowSettings(log_level="chatty")
