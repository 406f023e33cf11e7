"""Unit tests for audit-trail steps and their display."""

from __future__ import annotations

import pytest

from decision_workflow.workflow.steps import Step, StepKind, humanize

TRANSLATIONS: dict[str, object] = {
    "workflow_steps": {
        "reviewed_by_etd?": {
            "yes": "ETD has reviewed the provided evidence",
            "no": "Waiting on ETD to review the provided evidence",
        },
        "entry_point": {"reviewed_by_etd": "ETD has reviewed the provided evidence"},
        "idempotent_call": {"mark_for_review!": "Waiting on ETD to review evidence"},
    }
}


@pytest.mark.parametrize(
    ("result", "expected"),
    [
        (False, "Waiting on ETD to review the provided evidence"),
        (True, "ETD has reviewed the provided evidence"),
    ],
)
def test_decision_uses_translation(result: bool, expected: str) -> None:
    assert Step.decision("reviewed_by_etd?", result).display(TRANSLATIONS) == expected


def test_entry_point_uses_translation() -> None:
    step = Step.entry_point("reviewed_by_etd")
    assert step.display(TRANSLATIONS) == "ETD has reviewed the provided evidence"


def test_idempotent_call_uses_translation() -> None:
    step = Step.idempotent_call("mark_for_review!", skipped=True)
    assert step.display(TRANSLATIONS) == "Waiting on ETD to review evidence"


def test_missing_translation_falls_back_to_question_and_answer() -> None:
    step = Step.decision("is_this_a_question?", True)
    assert step.display(TRANSLATIONS) == "Is this a question? - Yes"
    assert step.display() == "Is this a question? - Yes"


def test_notification_displays_type_only() -> None:
    step = Step.notification(["receipt-1"])
    assert step.display() == "Notification"
    assert step.translation_key() == "workflow_steps.notification"


def test_entry_point_default_display() -> None:
    assert Step.entry_point("review_evidence").display() == "Entry point - Review evidence"


def test_humanize() -> None:
    assert humanize("send_email!") == "Send email!"
    assert humanize("YES") == "Yes"


def test_json_roundtrip() -> None:
    steps = [
        Step.decision("approved", True),
        Step.idempotent_call("send_email!", skipped=False),
        Step.notification(["sent:owner"]),
        Step.redirect("change_path"),
    ]

    restored = [Step.from_json(step.to_json()) for step in steps]

    assert restored == steps
    assert restored[0].kind is StepKind.DECISION
