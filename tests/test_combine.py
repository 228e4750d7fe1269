from __future__ import annotations

import logging
from typing import Any

import pytest

from unidux.actions import Action
from unidux.combine import combine_reducers
from unidux.config import UniduxConfig
from unidux.exceptions import InvalidReducerError


def _items(state: tuple[str, ...] | None, action: Action) -> tuple[str, ...]:
    if state is None:
        state = ()
    if action.type == "ADD":
        return (*state, action.value)
    return state


def _flag(state: bool | None, action: Action) -> bool:
    if state is None:
        state = False
    if action.type == "FLIP":
        return not state
    return state


def test_non_callable_reducer_rejected_with_key() -> None:
    with pytest.raises(InvalidReducerError) as excinfo:
        combine_reducers({"items": _items, "broken": 3})  # type: ignore[dict-item]
    assert excinfo.value.key == "broken"


def test_none_state_builds_defaults() -> None:
    root = combine_reducers({"items": _items, "flag": _flag})
    assert root(None, Action(type="@@init")) == {"items": (), "flag": False}


def test_unrecognized_action_returns_same_root_reference() -> None:
    root = combine_reducers({"items": _items, "flag": _flag})
    state = root(None, Action(type="@@init"))

    assert root(state, Action(type="SOMETHING_ELSE")) is state


def test_changed_slice_builds_new_root_and_keeps_other_slices() -> None:
    root = combine_reducers({"items": _items, "flag": _flag})
    state = root(None, Action(type="@@init"))

    next_state = root(state, Action(type="ADD", value="x"))

    assert next_state is not state
    assert next_state["items"] == ("x",)
    assert next_state["flag"] is state["flag"]
    # Input state is not mutated.
    assert state["items"] == ()


def test_each_slice_sees_only_its_own_state() -> None:
    seen: dict[str, Any] = {}

    def spy(key: str) -> Any:
        def reducer(state: Any, action: Action) -> Any:
            seen[key] = state
            return state

        return reducer

    root = combine_reducers({"a": spy("a"), "b": spy("b")})
    root({"a": 1, "b": 2}, Action(type="ANY"))

    assert seen == {"a": 1, "b": 2}


def test_later_mutation_of_mapping_has_no_effect() -> None:
    reducers: dict[str, Any] = {"items": _items}
    root = combine_reducers(reducers)
    reducers["flag"] = _flag

    assert root(None, Action(type="@@init")) == {"items": ()}


def test_reducer_exception_propagates() -> None:
    def boom(state: Any, action: Action) -> Any:
        raise KeyError("boom")

    root = combine_reducers({"items": _items, "boom": boom})
    with pytest.raises(KeyError):
        root({"items": (), "boom": None}, Action(type="ANY"))


class TestUnexpectedKeys:
    def test_debug_mode_warns_once_per_key(self, caplog: pytest.LogCaptureFixture) -> None:
        root = combine_reducers({"items": _items}, config=UniduxConfig(debug=True))
        state = {"items": (), "legacy": 1}

        with caplog.at_level(logging.WARNING, logger="unidux.combine"):
            assert root(state, Action(type="ANY")) is state
            root(state, Action(type="ANY"))

        warnings = [r for r in caplog.records if "legacy" in r.getMessage()]
        assert len(warnings) == 1

    def test_unexpected_keys_are_kept_when_a_slice_changes(self) -> None:
        root = combine_reducers({"items": _items}, config=UniduxConfig(debug=True))
        state = {"items": (), "legacy": 1}

        next_state = root(state, Action(type="ADD", value="x"))

        assert next_state == {"items": ("x",), "legacy": 1}

    def test_no_warning_outside_debug_mode(self, caplog: pytest.LogCaptureFixture) -> None:
        root = combine_reducers({"items": _items})

        with caplog.at_level(logging.WARNING, logger="unidux.combine"):
            root({"items": (), "legacy": 1}, Action(type="ANY"))

        assert caplog.records == []

    def test_empty_reducer_mapping_warns_in_debug_mode(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="unidux.combine"):
            root = combine_reducers({}, config=UniduxConfig(debug=True))

        assert any("no reducers" in r.getMessage() for r in caplog.records)
        assert root(None, Action(type="ANY")) == {}
