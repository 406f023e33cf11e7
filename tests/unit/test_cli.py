"""Unit tests for the inspection CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from decision_workflow import main as cli
from decision_workflow.storage.json_file import JsonFileStore
from decision_workflow.workflow.definition import DefinitionBuilder
from decision_workflow.workflow.engine import Workflow


class FinishedWorkflow(Workflow):
    def approved(self) -> bool:
        return True

    @classmethod
    def define(cls, flow: DefinitionBuilder) -> None:
        flow.decision("approved", yes=lambda ctx: ctx.finish(), no=lambda ctx: ctx.exit())
        flow.start(lambda ctx: ctx.decide("approved"))


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    monkeypatch.chdir(tmp_path)


def test_decode(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["decode", "__start/review:send_email!/finish!"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "entry_points": ["__start", "review"],
        "performed_actions": ["finish!", "send_email!"],
        "finished": True,
    }


def test_show(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "change.json"
    FinishedWorkflow(JsonFileStore(path))
    translations = tmp_path / "translations.json"
    translations.write_text(
        json.dumps({"workflow_steps": {"approved": {"yes": "The change was approved"}}}),
        encoding="utf-8",
    )

    code = cli.main(["show", "--path", str(path), "--translations", str(translations)])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["finished"] is True
    assert payload["entry_points"] == ["__start"]
    assert payload["steps"] == [
        "Entry point - Start",
        "The change was approved",
        "Idempotent call - Finish!",
    ]


def test_show_missing_document(tmp_path: Path) -> None:
    assert cli.main(["show", "--path", str(tmp_path / "missing.json")]) == 2


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])

    assert exc.value.code == 0
    assert "decision-workflow" in capsys.readouterr().out
