"""Left-to-right scanner for the greeting flags.

``--name`` and ``--shrimpsay`` are not Click options: ``--name`` swallows
whatever token follows it, a dangling ``--name`` is ignored, and every other
token is dropped without complaint. Click collects the raw tokens and this
module applies those rules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .greeting import DEFAULT_NAME

logger = logging.getLogger(__name__)

NAME_FLAG = "--name"
SHRIMPSAY_FLAG = "--shrimpsay"


@dataclass(frozen=True)
class Invocation:
    """Outcome of scanning one argument list.

    Attributes
    ----------
    name:
        Name to greet; the last ``--name`` value wins.
    shrimpsay:
        Whether the greeting is rendered inside the speech bubble.
    ignored:
        Tokens that carried no meaning, in the order they appeared.
    """

    name: str = DEFAULT_NAME
    shrimpsay: bool = False
    ignored: tuple[str, ...] = ()


def parse_arguments(args: Sequence[str]) -> Invocation:
    """Scan ``args`` and return the resulting :class:`Invocation`.

    Examples
    --------
    >>> parse_arguments([])
    Invocation(name='World', shrimpsay=False, ignored=())
    >>> parse_arguments(["--name", "Bob", "--name", "Alice", "--shrimpsay"])
    Invocation(name='Alice', shrimpsay=True, ignored=())
    >>> parse_arguments(["--name", "--shrimpsay"])
    Invocation(name='--shrimpsay', shrimpsay=False, ignored=())
    >>> parse_arguments(["extra", "--name"])
    Invocation(name='World', shrimpsay=False, ignored=('extra', '--name'))
    """
    name = DEFAULT_NAME
    shrimpsay = False
    ignored: list[str] = []
    index = 0
    while index < len(args):
        token = args[index]
        if token == NAME_FLAG and index + 1 < len(args):
            index += 1
            name = args[index]
        elif token == SHRIMPSAY_FLAG:
            shrimpsay = True
        else:
            if token == NAME_FLAG:
                logger.info("%s given without a value; keeping %r", NAME_FLAG, name)
            else:
                logger.debug("ignoring argument %r", token)
            ignored.append(token)
        index += 1
    return Invocation(name=name, shrimpsay=shrimpsay, ignored=tuple(ignored))


__all__ = ["NAME_FLAG", "SHRIMPSAY_FLAG", "Invocation", "parse_arguments"]
