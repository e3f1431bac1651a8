"""Rich-powered logging handler for CLI diagnostics.

Purpose
-------
Route the package's :mod:`logging` records to stderr through Rich so the
greeting on stdout stays untouched while warnings (e.g. greeting truncation)
remain readable and coloured.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleHandler` - :class:`logging.Handler` backed by a Rich console.
* :func:`configure_logging` - install the handler on the package logger.
"""

from __future__ import annotations

import logging
from typing import Mapping, MutableMapping

from rich.console import Console

from .config import Settings
from .levels import LogLevel

PACKAGE_LOGGER = "shrimpsay"

# Default Rich style per level; callers may override single entries.
_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
}


class RichConsoleHandler(logging.Handler):
    """Render log records on a Rich console with per-level styles."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Configure the handler with colour and style overrides."""
        super().__init__(level=level)
        if console is not None:
            self._console = console
        else:
            self._console = Console(
                stderr=True,
                force_terminal=True if force_color and not no_color else None,
                no_color=no_color,
            )
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            merged[LogLevel.from_name(key) if isinstance(key, str) else key] = value
        self._style_map = merged

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, record: logging.LogRecord) -> None:
        """Print ``record`` as a single styled line.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=200)
        >>> handler = RichConsoleHandler(console=console)
        >>> record = logging.LogRecord("shrimpsay.demo", logging.WARNING, __file__, 1, "careful", None, None)
        >>> handler.emit(record)
        >>> "WARNING shrimpsay.demo - careful" in console.export_text()
        True
        """
        try:
            level = LogLevel.from_python_level(record.levelno)
            style = "" if self._no_color else self._style_map.get(level, "")
            self._console.print(self.format_line(record, level), style=style, highlight=False, markup=False)
        except Exception:
            self.handleError(record)

    def format_line(self, record: logging.LogRecord, level: LogLevel) -> str:
        """Return the console line for ``record``."""
        return f"{level.icon} {level.name} {record.name} - {self.format(record)}"


def configure_logging(settings: Settings, *, console: Console | None = None) -> logging.Logger:
    """Install a single :class:`RichConsoleHandler` on the package logger.

    Calling this again replaces the previously installed handler, so repeated
    CLI invocations inside one process never duplicate output.

    Returns
    -------
    logging.Logger
        The configured ``shrimpsay`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [handler for handler in logger.handlers if isinstance(handler, RichConsoleHandler)]:
        logger.removeHandler(existing)
    handler = RichConsoleHandler(
        console=console,
        force_color=settings.force_color,
        no_color=settings.no_color,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(settings.log_level.to_python_level())
    return logger


__all__ = ["PACKAGE_LOGGER", "RichConsoleHandler", "configure_logging"]
