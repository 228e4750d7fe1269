"""State models for the todo list."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class VisibilityFilter(StrEnum):
    SHOW_ALL = "SHOW_ALL"
    SHOW_ACTIVE = "SHOW_ACTIVE"
    SHOW_COMPLETED = "SHOW_COMPLETED"


class Todo(BaseModel):
    """One item of the ``todos`` slice.

    Items are never mutated; toggling produces a shallow copy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int
    text: str
    completed: bool = False
