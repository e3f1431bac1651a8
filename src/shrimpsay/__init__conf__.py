"""Static distribution metadata shared by the CLI and packaging checks.

Keep these values in sync with ``pyproject.toml``; the CLI reads them for
``--version`` output and the program name shown in help screens.
"""

from __future__ import annotations

name = "shrimpsay"
version = "0.1.0"
shell_command = "shrimpsay"

__all__ = ["name", "version", "shell_command"]
