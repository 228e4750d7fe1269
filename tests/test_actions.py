from __future__ import annotations

import pytest

from unidux.actions import Action, coerce_action
from unidux.exceptions import InvalidActionError


def test_mapping_payload_becomes_attributes() -> None:
    action = coerce_action({"type": "ADD_TODO", "id": 3, "text": "Buy milk"})

    assert action.type == "ADD_TODO"
    assert action.id == 3
    assert action.text == "Buy milk"


def test_action_instances_pass_through() -> None:
    action = Action(type="PING")
    assert coerce_action(action) is action


def test_type_is_stripped() -> None:
    assert coerce_action({"type": "  PING "}).type == "PING"


def test_actions_are_frozen() -> None:
    action = coerce_action({"type": "PING"})
    with pytest.raises(ValueError):
        action.type = "PONG"  # type: ignore[misc]


@pytest.mark.parametrize("bad", [{"type": "   "}, {"type": None}, {1: "x", "type": "PING"}])
def test_bad_records_rejected(bad: dict) -> None:
    with pytest.raises(InvalidActionError):
        coerce_action(bad)


def test_validation_error_is_chained() -> None:
    with pytest.raises(InvalidActionError) as excinfo:
        coerce_action({"type": ""})
    assert excinfo.value.__cause__ is not None
