"""Command-line driver for the greeting.

Purpose
-------
Expose ``shrimpsay`` as a rich-click command and a test-friendly :func:`main`
wrapper that runs it through :mod:`lib_cli_exit_tools`.

Contents
--------
* :class:`GreetingCommand` - rich-click command that passes every token to the
  argument scanner unparsed.
* :func:`cli` - the command; greeting flags are scanned by
  :func:`shrimpsay.arguments.parse_arguments`.
* :func:`main` - entry point used by the console script and ``python -m``.

System Role
-----------
Composition point: resolves settings, installs the diagnostics handler, then
chains the argument scanner, the greeting formatter and the bubble renderer.
Click only sees the arguments when ``--help`` or ``--version`` is the sole
token; in every other case the scanner receives the argument list verbatim.
"""

from __future__ import annotations

import logging
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click import UNPROCESSED

from . import __init__conf__
from .arguments import parse_arguments
from .bubble import print_bubble
from .config import load_settings
from .console import configure_logging
from .greeting import format_greeting

logger = logging.getLogger(__name__)

HELP_FLAG = "--help"
VERSION_FLAG = "--version"

CLICK_CONTEXT_SETTINGS = {
    "help_option_names": [HELP_FLAG],
}


class GreetingCommand(click.RichCommand):
    """Rich-click command whose options never consume greeting tokens.

    A lone ``--help`` or ``--version`` is parsed by Click as usual. Anything
    else is prefixed with ``--`` so Click's parser stops before the first
    token: short-option clusters are not split, a user-supplied ``--``
    survives, and ``--help`` can still be a ``--name`` value.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if args in ([HELP_FLAG], [VERSION_FLAG]):
            return super().parse_args(ctx, args)
        return super().parse_args(ctx, ["--", *args])


@click.command(cls=GreetingCommand, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    __init__conf__.version,
    VERSION_FLAG,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.name} version {__init__conf__.version}",
)
@click.argument("args", nargs=-1, type=UNPROCESSED, metavar="[--name VALUE] [--shrimpsay]")
def cli(args: tuple[str, ...]) -> None:
    """Print ``Hello, <name>!``, optionally spoken by a shrimp.

    \b
    --name VALUE   name to greet (default: World; the last one wins)
    --shrimpsay    render the greeting inside a speech bubble
    """
    settings = load_settings()
    lib_cli_exit_tools.config.traceback = settings.traceback
    lib_cli_exit_tools.config.traceback_force_color = settings.traceback

    configure_logging(settings)
    invocation = parse_arguments(args)
    logger.debug("resolved %s", invocation)

    greeting = format_greeting(invocation.name)
    if invocation.shrimpsay:
        print_bubble(greeting, writer=click.echo)
    else:
        click.echo(greeting)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run :func:`cli` and return its exit code.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).
    restore_traceback:
        Reset the :mod:`lib_cli_exit_tools` traceback preferences after the
        run so embedding callers keep their own settings.

    Returns
    -------
    int
        Zero for every greeting path; non-zero only for unexpected errors such
        as an invalid ``SHRIMPSAY_LOG_LEVEL``.
    """
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["GreetingCommand", "cli", "main"]
