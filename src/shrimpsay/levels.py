"""Diagnostic severities as shown on the stderr console.

:class:`LogLevel` mirrors the standard :mod:`logging` levels and adds the
glyph the console handler prints in front of each record.
"""

from __future__ import annotations

import logging
from enum import Enum

# Console glyph per level name.
_ICONS = {
    "DEBUG": "🐞",
    "INFO": "ℹ",
    "WARNING": "⚠",
    "ERROR": "✖",
    "CRITICAL": "☠",
}


class LogLevel(Enum):
    """Severities accepted by ``SHRIMPSAY_LOG_LEVEL``."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @property
    def icon(self) -> str:
        return _ICONS[self.name]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` number for this level.

        >>> LogLevel.WARNING.to_python_level() == logging.WARNING
        True
        """
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve a case-insensitive level name.

        >>> LogLevel.from_name(" info ") is LogLevel.INFO
        True
        """
        try:
            return cls[name.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Map a record's level number to the closest member at or below it.

        Custom levels between the standard ones round down; anything below
        ``DEBUG`` is shown as ``DEBUG``.

        >>> LogLevel.from_python_level(25) is LogLevel.INFO
        True
        >>> LogLevel.from_python_level(5) is LogLevel.DEBUG
        True
        """
        resolved = cls.DEBUG
        for member in cls:
            if member.value <= level:
                resolved = member
        return resolved


__all__ = ["LogLevel"]
