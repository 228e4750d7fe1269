"""Helpers for log-safe summaries of actions and state.

Actions and state trees may hold arbitrarily large payloads.  This module
produces bounded copies suitable for DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel


def summarize_for_log(value: Any, *, max_string: int = 256, _depth: int = 0) -> Any:
    """Return a bounded copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, BaseModel):
        return summarize_for_log(value.model_dump(), max_string=max_string, _depth=_depth + 1)

    if isinstance(value, Mapping):
        return {str(k): summarize_for_log(v, max_string=max_string, _depth=_depth + 1) for k, v in value.items()}

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [summarize_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    # Unknown objects (callables, handles) are shown without their internals.
    return repr(value)
