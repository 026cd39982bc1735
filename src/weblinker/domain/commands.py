"""Command grammar — tokenize and validate interpreter lines.

Pure functions, no infrastructure dependencies. Consumed by the
interpreter service, which turns each :class:`Command` into one or
more graph operations.

Grammar::

    @addPages   <page> ...
    @addLinks   <source> <target> ...
    @isConnected <source> <target>
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from weblinker.domain.types import CommandKeyword

_WHITESPACE = re.compile(r"\s+")


class CommandSyntaxError(ValueError):
    """A line that does not match the command grammar."""

    def __init__(self, message: str, *, line: str) -> None:
        super().__init__(message)
        self.line = line


@dataclass(frozen=True)
class Command:
    """A parsed command line."""

    keyword: CommandKeyword
    args: tuple[str, ...] = ()


def tokenize(line: str) -> list[str]:
    """Split *line* on whitespace, dropping empty tokens.

    Every token is free of whitespace, including embedded tabs and
    carriage returns.
    """
    return [token for token in _WHITESPACE.split(line) if token]


def parse_command(line: str) -> Command | None:
    """Parse one input line into a :class:`Command`.

    Returns None for a blank line. Raises :class:`CommandSyntaxError`
    for an unknown keyword or the wrong number of arguments.
    """
    tokens = tokenize(line)
    if not tokens:
        return None

    head, args = tokens[0], tuple(tokens[1:])
    try:
        keyword = CommandKeyword(head)
    except ValueError:
        raise CommandSyntaxError(f"Unknown command '{head}'", line=line) from None

    if keyword is CommandKeyword.ADD_LINKS and len(args) < 2:
        msg = f"{keyword} needs a source page and at least one target page"
        raise CommandSyntaxError(msg, line=line)
    if keyword is CommandKeyword.IS_CONNECTED and len(args) != 2:
        msg = f"{keyword} takes exactly two pages, got {len(args)}"
        raise CommandSyntaxError(msg, line=line)

    return Command(keyword=keyword, args=args)
