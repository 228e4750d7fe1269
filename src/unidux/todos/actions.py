"""Todo actions and action creators."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, TypeVar

from pydantic import ConfigDict, StrictInt, StrictStr, ValidationError

from unidux.actions import Action
from unidux.exceptions import InvalidActionError
from unidux.todos.models import VisibilityFilter


class TodoActionType(StrEnum):
    ADD_TODO = "ADD_TODO"
    TOGGLE_TODO = "TOGGLE_TODO"
    SET_VISIBILITY_FILTER = "SET_VISIBILITY_FILTER"


class AddTodo(Action):
    model_config = ConfigDict(extra="forbid")

    type: Literal["ADD_TODO"] = "ADD_TODO"
    id: StrictInt
    text: StrictStr


class ToggleTodo(Action):
    model_config = ConfigDict(extra="forbid")

    type: Literal["TOGGLE_TODO"] = "TOGGLE_TODO"
    id: StrictInt


class SetVisibilityFilter(Action):
    model_config = ConfigDict(extra="forbid")

    type: Literal["SET_VISIBILITY_FILTER"] = "SET_VISIBILITY_FILTER"
    filter: VisibilityFilter


_TypedAction = TypeVar("_TypedAction", AddTodo, ToggleTodo, SetVisibilityFilter)


def typed_action(model: type[_TypedAction], action: Action) -> _TypedAction:
    """Validate a generic action's payload against its typed model.

    Actions built by the creators below pass through untouched; actions
    dispatched as plain mappings are checked here before a reducer reads
    their payload.

    Raises
    ------
    InvalidActionError
        If the payload does not match *model*.
    """
    if isinstance(action, model):
        return action
    try:
        return model.model_validate(action.model_dump())
    except ValidationError as exc:
        raise InvalidActionError(
            f"Invalid {action.type} payload: {exc.errors()[0]['msg']}",
            action=action,
        ) from exc


class IdSequence:
    """Caller-owned monotonic source of todo identifiers.

    Each store/view tree gets its own sequence, so identifiers are
    reproducible in tests and never shared through module state.
    """

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def __iter__(self) -> IdSequence:
        return self

    def __next__(self) -> int:
        return self.next_id()

    @property
    def peek(self) -> int:
        """The identifier the next call will return."""
        return self._next

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value


def add_todo(text: str, *, ids: IdSequence) -> AddTodo:
    return AddTodo(id=ids.next_id(), text=text)


def toggle_todo(todo_id: int) -> ToggleTodo:
    return ToggleTodo(id=todo_id)


def set_visibility_filter(filter: VisibilityFilter | str) -> SetVisibilityFilter:  # noqa: A002
    return SetVisibilityFilter(filter=VisibilityFilter(filter))
