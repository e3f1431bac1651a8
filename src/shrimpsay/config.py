"""Environment-driven runtime settings for the CLI.

Purpose
-------
Collect the few knobs that affect diagnostics (threshold, colour and
traceback verbosity) in one immutable record so the CLI can resolve them once
per run. There are no configuration files; only ``SHRIMPSAY_*`` environment
variables are read, which keeps every command-line token free for the
greeting flags.

Contents
--------
* :class:`Settings` - resolved settings.
* :func:`load_settings` - build :class:`Settings` from an environment mapping.
* Helper coercions mirroring the environment parsing rules.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .levels import LogLevel

LOG_LEVEL_ENV_VAR = "SHRIMPSAY_LOG_LEVEL"
FORCE_COLOR_ENV_VAR = "SHRIMPSAY_FORCE_COLOR"
NO_COLOR_ENV_VAR = "SHRIMPSAY_NO_COLOR"
TRACEBACK_ENV_VAR = "SHRIMPSAY_TRACEBACK"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings.

    Attributes
    ----------
    log_level:
        Threshold for diagnostics written to stderr.
    force_color:
        Emit ANSI colour even when stderr is not a terminal.
    no_color:
        Suppress colour entirely; wins over ``force_color``.
    traceback:
        Print full tracebacks for unexpected errors instead of a summary.
    """

    log_level: LogLevel = LogLevel.WARNING
    force_color: bool = False
    no_color: bool = False
    traceback: bool = False


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Return :class:`Settings` resolved from ``environ`` (default ``os.environ``).

    Raises
    ------
    ValueError
        If ``SHRIMPSAY_LOG_LEVEL`` names an unknown level.

    Examples
    --------
    >>> load_settings({})
    Settings(log_level=<LogLevel.WARNING: 30>, force_color=False, no_color=False, traceback=False)
    >>> load_settings({"SHRIMPSAY_LOG_LEVEL": "debug", "SHRIMPSAY_NO_COLOR": "1"}).no_color
    True
    """
    env = os.environ if environ is None else environ
    defaults = Settings()
    return Settings(
        log_level=_coerce_level(env.get(LOG_LEVEL_ENV_VAR), defaults.log_level),
        force_color=_env_bool(env, FORCE_COLOR_ENV_VAR, defaults.force_color),
        no_color=_env_bool(env, NO_COLOR_ENV_VAR, defaults.no_color),
        traceback=_env_bool(env, TRACEBACK_ENV_VAR, defaults.traceback),
    )


def _coerce_level(value: str | None, fallback: LogLevel) -> LogLevel:
    """Parse a level name, keeping ``fallback`` for unset or blank values."""
    if value is None or not value.strip():
        return fallback
    try:
        return LogLevel.from_name(value)
    except ValueError as exc:
        raise ValueError(f"{LOG_LEVEL_ENV_VAR} must name a log level, got {value!r}") from exc


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    """Return the boolean value of ``env[name]`` with fallback.

    Examples
    --------
    >>> _env_bool({}, "X", default=True)
    True
    >>> _env_bool({"X": "0"}, "X", default=True)
    False
    >>> _env_bool({"X": " On "}, "X", default=False)
    True
    """
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


__all__ = [
    "FORCE_COLOR_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "Settings",
    "TRACEBACK_ENV_VAR",
    "load_settings",
]
