r"""Speech-bubble renderer with the shrimp mascot.

The render is a three-line box around the message followed by a fixed tail
that never depends on the input::

     +-------+
     | Hello |
     +-------+
        \
         \
          (°>)
          /|
          \|
          <>
"""

from __future__ import annotations

from typing import Callable

SHRIMP_TAIL: tuple[str, ...] = (
    "    \\",
    "     \\",
    "      (°>)",
    "      /|",
    "      \\|",
    "      <>",
)


def _border(message: str) -> str:
    return " +" + "-" * (len(message) + 2) + "+"


def bubble_lines(message: str) -> list[str]:
    """Return the render of ``message`` as a list of lines without terminators.

    Examples
    --------
    >>> bubble_lines("")[:3]
    [' +--+', ' |  |', ' +--+']
    """
    border = _border(message)
    return [border, f" | {message} |", border, *SHRIMP_TAIL]


def render_bubble(message: str) -> str:
    r"""Return the full render of ``message``, every line newline-terminated.

    Examples
    --------
    >>> print(render_bubble("Hi"), end="")
     +----+
     | Hi |
     +----+
        \
         \
          (°>)
          /|
          \|
          <>
    """
    return "".join(f"{line}\n" for line in bubble_lines(message))


def print_bubble(message: str, *, writer: Callable[[str], None] = print) -> None:
    """Write the render of ``message`` line by line through ``writer``.

    ``writer`` receives one line per call and is expected to append the line
    terminator itself, as :func:`print` and :func:`click.echo` do.
    """
    for line in bubble_lines(message):
        writer(line)


__all__ = ["SHRIMP_TAIL", "bubble_lines", "print_bubble", "render_bubble"]
