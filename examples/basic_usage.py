#!/usr/bin/env python3
"""Change-review workflow example.

This demonstrates:

* load settings from `.env`
* define a workflow from yes/no decisions and entry points
* persist its state to a JSON document between runs

Run it several times: the submission email is only ever sent once. Pass
`--review` to resume the workflow at its `review` entry point.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from decision_workflow import (
    DefinitionBuilder,
    ExecutionContext,
    JsonFileStore,
    Workflow,
    WorkflowSettings,
    action,
)
from decision_workflow.logging import configure_logging


def _approve(ctx: ExecutionContext) -> None:
    ctx.run("send_approval_email")
    ctx.finish()


class ChangeReviewWorkflow(Workflow):
    def evidence_provided(self) -> bool:
        return True

    def review(self) -> None:
        print("Reviewer picked up the change")

    @action(mutating=True)
    def send_submission_email(self) -> None:
        print("Emailing the reviewers")

    @action(mutating=True)
    def send_approval_email(self) -> None:
        print("Emailing the requester")

    @classmethod
    def define(cls, flow: DefinitionBuilder) -> None:
        flow.decision(
            "evidence_provided",
            yes=lambda ctx: ctx.run("send_submission_email"),
            no=lambda ctx: ctx.exit(lambda c: c.redirect_to("upload_evidence")),
        )
        flow.entry("review", _approve)
        flow.start(lambda ctx: ctx.decide("evidence_provided"))


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the change-review workflow once.")
    parser.add_argument("--state", default=None, help="State document path")
    parser.add_argument("--review", action="store_true", help="Resume at the review step")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = WorkflowSettings()
    configure_logging(settings.log_level)

    store = JsonFileStore(Path(args.state) if args.state else settings.state_path)
    workflow = ChangeReviewWorkflow(store, settings=settings)
    if args.review:
        workflow.review()

    print(f"State: {store.state}")
    for step in workflow.steps:
        print(f"  - {step.display()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
