"""Unit tests for the persisted state string."""

from __future__ import annotations

import pytest

from decision_workflow.workflow.codec import WorkflowState, decode, encode, validate_name
from decision_workflow.workflow.errors import DefinitionError, InvalidNameError
from decision_workflow.workflow.ordered_set import OrderedSet


@pytest.mark.parametrize("raw", [None, "", "__start", "no-separator-here"])
def test_decode_fresh_state(raw: str | None) -> None:
    points, actions = decode(raw)
    assert points.to_list() == []
    assert actions == set()


def test_decode_both_halves() -> None:
    points, actions = decode("__start/review:send_email!/finish!")

    assert points.to_list() == ["__start", "review"]
    assert actions == {"send_email!", "finish!"}


def test_decode_with_empty_halves() -> None:
    assert decode("__start:") == (OrderedSet(["__start"]), set())
    assert decode(":send_email!") == (OrderedSet(), {"send_email!"})
    assert decode(":") == (OrderedSet(), set())


def test_encode_matches_persisted_format() -> None:
    assert encode(OrderedSet(["__start"]), {"send_email!"}) == "__start:send_email!"
    assert encode(OrderedSet(["__start", "review"]), set()) == "__start/review:"
    assert encode(OrderedSet(), set()) == ":"


def test_encode_is_stable_for_unordered_actions() -> None:
    first = encode(["__start"], ["b!", "a!"])
    second = encode(["__start"], ["a!", "b!"])
    assert first == second == "__start:a!/b!"


@pytest.mark.parametrize(
    ("points", "actions"),
    [
        ([], set()),
        (["__start"], set()),
        ([], {"finish!"}),
        (["__start", "review", "approve"], {"send_email!", "notify_owner!"}),
    ],
)
def test_decode_inverts_encode(points: list[str], actions: set[str]) -> None:
    decoded_points, decoded_actions = decode(encode(OrderedSet(points), actions))
    assert decoded_points == OrderedSet(points)
    assert decoded_actions == actions


def test_workflow_state_helpers() -> None:
    state = WorkflowState.decode("__start:send_email!")
    state.entry_points.add("review")
    state.performed_actions.add("finish!")

    assert state.encode() == "__start/review:finish!/send_email!"


@pytest.mark.parametrize("name", ["", "a/b", "a:b"])
def test_validate_name_rejects_reserved_characters(name: str) -> None:
    with pytest.raises(InvalidNameError):
        validate_name(name)


def test_invalid_name_is_a_definition_error() -> None:
    assert issubclass(InvalidNameError, DefinitionError)
    assert validate_name("send_email!") == "send_email!"
