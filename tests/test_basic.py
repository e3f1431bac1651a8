"""Behavioral tests for the greeting formatter and the bubble renderer."""

from __future__ import annotations

import logging

import pytest

import shrimpsay
from shrimpsay import MAX_GREETING_LENGTH, format_greeting, print_bubble, render_bubble
from shrimpsay.bubble import SHRIMP_TAIL, bubble_lines

EXPECTED_TAIL = """\
    \\
     \\
      (°>)
      /|
      \\|
      <>
"""


@pytest.mark.parametrize("name", ["World", "Alice", "", "Jean-Luc Picard", "名前", "  padded  "])
def test_format_greeting_wraps_name(name: str) -> None:
    assert format_greeting(name) == "Hello, " + name + "!"


def test_format_greeting_truncates_to_capacity(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="shrimpsay"):
        greeting = format_greeting("x" * 300)

    assert len(greeting) == MAX_GREETING_LENGTH == 255
    assert greeting.startswith("Hello, xxx")
    assert not greeting.endswith("!")
    assert "greeting truncated from 308 to 255 characters" in caplog.text


def test_format_greeting_at_exact_capacity_is_untouched(caplog: pytest.LogCaptureFixture) -> None:
    name = "y" * (MAX_GREETING_LENGTH - len("Hello, !"))

    with caplog.at_level(logging.WARNING, logger="shrimpsay"):
        greeting = format_greeting(name)

    assert greeting == f"Hello, {name}!"
    assert caplog.records == []


def test_format_greeting_without_limit() -> None:
    name = "z" * 1000
    assert format_greeting(name, max_length=None) == f"Hello, {name}!"


def test_render_bubble_for_alice() -> None:
    expected = (
        " +---------------+\n"
        " | Hello, Alice! |\n"
        " +---------------+\n"
    ) + EXPECTED_TAIL
    assert render_bubble("Hello, Alice!") == expected


def test_render_bubble_border_width_matches_message() -> None:
    top, content, bottom = bubble_lines("Hello, Alice!")[:3]

    assert len(top.lstrip()) == len("Hello, Alice!") + 4
    assert top == bottom
    assert content == " | Hello, Alice! |"


@pytest.mark.parametrize("length", [0, 1, 2, 13, 80, 255])
def test_border_has_message_length_plus_two_dashes(length: int) -> None:
    border = bubble_lines("m" * length)[0]

    assert border == " +" + "-" * (length + 2) + "+"


def test_empty_message_still_renders_a_box() -> None:
    assert bubble_lines("")[:3] == [" +--+", " |  |", " +--+"]


def test_tail_is_independent_of_message() -> None:
    assert tuple(bubble_lines("a")[3:]) == tuple(bubble_lines("a much longer message")[3:]) == SHRIMP_TAIL


def test_print_bubble_writes_each_line(capsys: pytest.CaptureFixture[str]) -> None:
    print_bubble("Hi")

    assert capsys.readouterr().out == render_bubble("Hi")


def test_print_bubble_uses_custom_writer() -> None:
    lines: list[str] = []

    print_bubble("Hi", writer=lines.append)

    assert lines == bubble_lines("Hi")


def test_package_exports_helpers() -> None:
    assert set(shrimpsay.__all__) >= {"format_greeting", "render_bubble", "print_bubble"}
    assert shrimpsay.DEFAULT_NAME == "World"
