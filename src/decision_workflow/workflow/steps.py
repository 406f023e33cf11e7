"""Audit-trail entries.

Each instantiation of a workflow builds an ordered list of steps describing
what it decided and did. Steps can be persisted by a store and rendered for
display with an optional nested translation mapping such as::

    {"workflow_steps": {"reviewed": {"yes": "Evidence has been reviewed"}}}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

YES = "YES"
NO = "NO"
RUN = "RUN"
SKIPPED = "SKIPPED"

TRANSLATION_ROOT = "workflow_steps"


class StepKind(str, Enum):
    DECISION = "decision"
    ENTRY_POINT = "entry_point"
    IDEMPOTENT_CALL = "idempotent_call"
    REDIRECT = "redirect"
    NOTIFICATION = "notification"


def humanize(text: str) -> str:
    words = text.replace("_", " ").strip().lower()
    return words[:1].upper() + words[1:]


def _lookup(translations: Mapping[str, object], key: str) -> str | None:
    node: object = translations
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


@dataclass(frozen=True, slots=True)
class Step:
    kind: StepKind
    subject: str
    outcome: str | None = None
    details: tuple[str, ...] = ()

    @staticmethod
    def decision(name: str, result: bool) -> Step:
        return Step(kind=StepKind.DECISION, subject=name, outcome=YES if result else NO)

    @staticmethod
    def entry_point(name: str) -> Step:
        return Step(kind=StepKind.ENTRY_POINT, subject=name)

    @staticmethod
    def idempotent_call(name: str, *, skipped: bool) -> Step:
        return Step(
            kind=StepKind.IDEMPOTENT_CALL, subject=name, outcome=SKIPPED if skipped else RUN
        )

    @staticmethod
    def redirect(target: str) -> Step:
        return Step(kind=StepKind.REDIRECT, subject=target)

    @staticmethod
    def notification(receipts: list[str]) -> Step:
        return Step(kind=StepKind.NOTIFICATION, subject="", details=tuple(receipts))

    def _type_and_info(self) -> tuple[str, str | None]:
        if self.kind is StepKind.DECISION:
            return self.subject, self.outcome
        if self.kind is StepKind.NOTIFICATION:
            return self.kind.value, None
        return self.kind.value, self.subject

    def translation_key(self) -> str:
        step_type, info = self._type_and_info()
        key = f"{TRANSLATION_ROOT}.{step_type.lower().replace(' ', '_')}"
        if info:
            key += f".{info.lower()}"
        return key

    def default_display(self) -> str:
        step_type, info = self._type_and_info()
        text = humanize(step_type)
        if info:
            text += f" - {humanize(info)}"
        return text

    def display(self, translations: Mapping[str, object] | None = None) -> str:
        """Render the step, preferring a translation when one exists."""

        if translations:
            translated = _lookup(translations, self.translation_key())
            if translated is not None:
                return translated
        return self.default_display()

    def to_json(self) -> dict[str, object]:
        out: dict[str, object] = {"kind": self.kind.value, "subject": self.subject}
        if self.outcome is not None:
            out["outcome"] = self.outcome
        if self.details:
            out["details"] = list(self.details)
        return out

    @staticmethod
    def from_json(obj: Mapping[str, object]) -> Step:
        kind = StepKind(str(obj.get("kind")))
        subject_raw = obj.get("subject")
        outcome_raw = obj.get("outcome")
        details_raw = obj.get("details")
        details = (
            tuple(str(d) for d in details_raw) if isinstance(details_raw, list) else ()
        )
        return Step(
            kind=kind,
            subject=subject_raw if isinstance(subject_raw, str) else "",
            outcome=outcome_raw if isinstance(outcome_raw, str) else None,
            details=details,
        )
