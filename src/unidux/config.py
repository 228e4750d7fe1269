"""Store configuration for unidux."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

_TRUE_WORDS = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "n", "off"})


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean switch; unset or unrecognised values keep *default*."""
    word = os.environ.get(name, "").strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class UniduxConfig:
    """Store and composer configuration.

    Parameters
    ----------
    debug : bool
        Development mode.  The reducer composer logs a warning for state
        keys that no slice reducer owns.  Shape drift never raises.
    log_actions : bool
        Log a summary of every dispatched action at DEBUG level.
    log_max_string : int
        Strings longer than this are truncated in action/state log
        summaries.
    """

    debug: bool = False
    log_actions: bool = False
    log_max_string: int = 256

    @classmethod
    def from_env(cls, **overrides: Any) -> UniduxConfig:
        """Create configuration from environment variables.

        Reads ``UNIDUX_DEBUG``, ``UNIDUX_LOG_ACTIONS`` and
        ``UNIDUX_LOG_MAX_STRING``.  Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        UniduxConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "debug" not in overrides:
            config_kwargs["debug"] = _env_flag("UNIDUX_DEBUG")

        if "log_actions" not in overrides:
            config_kwargs["log_actions"] = _env_flag("UNIDUX_LOG_ACTIONS")

        max_string_env = env.get("UNIDUX_LOG_MAX_STRING")
        if max_string_env is not None and "log_max_string" not in overrides:
            config_kwargs["log_max_string"] = int(max_string_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
