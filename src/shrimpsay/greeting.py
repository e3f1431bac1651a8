"""Greeting formatter.

Builds ``Hello, <name>!`` into a fixed capacity of :data:`GREETING_CAPACITY`
slots, one of which is held by a terminator: the result never exceeds
:data:`MAX_GREETING_LENGTH` characters and longer results are cut silently
(only a log record is emitted).
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_NAME = "World"
GREETING_CAPACITY = 256
MAX_GREETING_LENGTH = GREETING_CAPACITY - 1


def format_greeting(name: str, *, max_length: int | None = MAX_GREETING_LENGTH) -> str:
    """Return ``"Hello, " + name + "!"`` truncated to ``max_length`` characters.

    Parameters
    ----------
    name:
        Text to greet; used verbatim.
    max_length:
        Upper bound on the result length. ``None`` disables truncation.

    Examples
    --------
    >>> format_greeting("Alice")
    'Hello, Alice!'
    >>> format_greeting("")
    'Hello, !'
    >>> format_greeting("Alice", max_length=8)
    'Hello, A'
    """
    greeting = f"Hello, {name}!"
    if max_length is not None and len(greeting) > max_length:
        logger.warning("greeting truncated from %d to %d characters", len(greeting), max_length)
        return greeting[:max_length]
    return greeting


__all__ = ["DEFAULT_NAME", "GREETING_CAPACITY", "MAX_GREETING_LENGTH", "format_greeting"]
