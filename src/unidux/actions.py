"""Action records.

Every state change is described by an action: a record with a ``type``
discriminant plus kind-specific payload fields.  Callers may dispatch plain
mappings; the store coerces them into :class:`Action` models before any
reducer sees them, so reducers always use attribute access.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from unidux.exceptions import InvalidActionError

#: Type of the synthetic action used to ask reducers for their defaults.
INIT_ACTION_TYPE = "@@unidux/INIT"


class Action(BaseModel):
    """A tagged record describing an intended state change."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str

    @field_validator("type")
    @classmethod
    def _normalize_type(cls, value: str) -> str:
        action_type = value.strip()
        if not action_type:
            raise ValueError("type must be non-empty")
        return action_type


def coerce_action(value: Any) -> Action:
    """Return *value* as an :class:`Action`.

    Raises
    ------
    InvalidActionError
        If *value* is not a mapping/``Action`` or has no valid ``type``.
    """
    if isinstance(value, Action):
        return value
    if not isinstance(value, Mapping):
        raise InvalidActionError(
            f"Actions must be mappings or Action models, got {type(value).__name__}",
            action=value,
        )
    if "type" not in value:
        raise InvalidActionError("Action is missing the 'type' discriminant", action=value)
    if not all(isinstance(key, str) for key in value):
        raise InvalidActionError("Action keys must be strings", action=value)
    try:
        return Action.model_validate(dict(value))
    except ValidationError as exc:
        raise InvalidActionError(f"Invalid action: {exc.errors()[0]['msg']}", action=value) from exc
