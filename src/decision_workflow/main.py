"""CLI entrypoint for inspecting persisted workflow state."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from decision_workflow import __version__
from decision_workflow.config import WorkflowSettings
from decision_workflow.logging import configure_logging
from decision_workflow.storage.json_file import JsonFileStore
from decision_workflow.workflow.codec import decode
from decision_workflow.workflow.engine import FINISH_ACTION

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decision-workflow",
        description="Inspect the persisted state of resumable workflows",
    )
    parser.add_argument(
        "--version", action="version", version=f"decision-workflow {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_cmd = subparsers.add_parser("decode", help="Decode a raw workflow state string")
    decode_cmd.add_argument("state", help="State string, e.g. '__start/review:send_email!'")

    show = subparsers.add_parser(
        "show", help="Show the state and audit trail stored in a JSON state document"
    )
    show.add_argument(
        "--path",
        default=None,
        help="State document path (defaults to DECISION_WORKFLOW_STATE_PATH)",
    )
    show.add_argument(
        "--translations",
        default=None,
        help="JSON file with a nested 'workflow_steps' translation mapping",
    )
    return parser


def _describe(raw: str) -> dict[str, object]:
    entry_points, performed_actions = decode(raw)
    return {
        "entry_points": entry_points.to_list(),
        "performed_actions": sorted(performed_actions),
        "finished": FINISH_ACTION in performed_actions,
    }


def _load_translations(path: str | None) -> dict[str, object] | None:
    if path is None:
        return None
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Translations file must contain a JSON object: {path}")
    return raw


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = WorkflowSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        if args.command == "decode":
            print(json.dumps(_describe(args.state), indent=2))
            return 0

        if args.command == "show":
            path = Path(args.path) if args.path else settings.state_path
            if not path.exists():
                logger.error("State document not found", extra={"path": str(path)})
                return 2

            translations = _load_translations(args.translations)
            store = JsonFileStore(path)
            payload = _describe(store.state)
            payload["steps"] = [step.display(translations) for step in store.fetch_steps() or []]
            print(json.dumps(payload, indent=2, ensure_ascii=False))
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except (ValidationError, ValueError) as e:
        logger.error("Invalid input", extra={"error": str(e)})
        print(str(e), file=sys.stderr)
        return 2

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
