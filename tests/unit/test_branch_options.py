"""Unit tests for capturing the yes and no procedures of a decision."""

from __future__ import annotations

import pytest

from decision_workflow.workflow.errors import YesAndNoRequiredError
from decision_workflow.workflow.options import BranchOptions


def _yes(_ctx: object) -> None:
    return None


def _no(_ctx: object) -> None:
    return None


def test_options_returns_yes_then_no() -> None:
    branch = BranchOptions("approved")
    branch.no(_no)
    branch.yes(_yes)

    assert branch.complete
    assert branch.options() == (_yes, _no)


def test_setters_work_as_decorators() -> None:
    branch = BranchOptions("approved")

    @branch.yes
    def on_yes(_ctx: object) -> None:
        return None

    assert on_yes is not None
    assert not branch.complete


@pytest.mark.parametrize("supplied", ["yes", "no", "neither"])
def test_missing_branch_raises(supplied: str) -> None:
    branch = BranchOptions("approved")
    if supplied == "yes":
        branch.yes(_yes)
    elif supplied == "no":
        branch.no(_no)

    with pytest.raises(YesAndNoRequiredError, match="approved"):
        branch.options()
