from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator

import lib_cli_exit_tools
import pytest
from rich.console import Console

from shrimpsay.console import PACKAGE_LOGGER, RichConsoleHandler


@pytest.fixture
def record_console() -> Console:
    """Rich console that records output instead of writing to a terminal."""

    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture(autouse=True)
def _isolate_cli_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep traceback preferences, environment and package handlers per-test."""

    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    for variable in ("SHRIMPSAY_LOG_LEVEL", "SHRIMPSAY_FORCE_COLOR", "SHRIMPSAY_NO_COLOR", "SHRIMPSAY_TRACEBACK"):
        monkeypatch.delenv(variable, raising=False)
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield
    for handler in [h for h in logger.handlers if isinstance(h, RichConsoleHandler)]:
        logger.removeHandler(handler)
    logger.setLevel(level)
