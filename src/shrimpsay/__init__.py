"""Public package surface: the greeting formatter and the bubble renderer.

Both ``import shrimpsay`` and the ``shrimpsay`` console script go through the
same two helpers, so library callers get exactly the text the CLI prints.
"""

from __future__ import annotations

from .bubble import print_bubble, render_bubble
from .greeting import DEFAULT_NAME, MAX_GREETING_LENGTH, format_greeting

__all__ = [
    "DEFAULT_NAME",
    "MAX_GREETING_LENGTH",
    "format_greeting",
    "print_bubble",
    "render_bubble",
]
