"""Command: run graph commands from a file or stdin."""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import click

from weblinker.commands._base import WlCommand
from weblinker.domain.types import ErrorCode
from weblinker.services.result import failure

if TYPE_CHECKING:
    from collections.abc import Iterator

    from weblinker.commands._context import AppContext

_RUN_EXAMPLES = """\
  weblinker run commands.txt
  printf '@addPages a b\\n@addLinks a b\\n@isConnected a b\\n' | weblinker run
  weblinker --json run commands.txt
  weblinker -c weblinker.toml run commands.txt"""


@contextmanager
def _open_input(app: AppContext, path: Path | None) -> Iterator[TextIO]:
    """Yield the command stream: *path* if given, stdin otherwise.

    Both are decoded with the ``[input]`` encoding and error policy.
    Exits with status 1 if the stream cannot be opened.
    """
    encoding = app.settings.input.encoding
    errors = app.settings.input.errors
    try:
        if path is None:
            stream: TextIO = sys.stdin
            if isinstance(stream, io.TextIOWrapper):
                stream.reconfigure(encoding=encoding, errors=errors)
        else:
            stream = path.open(encoding=encoding, errors=errors)
    except (OSError, LookupError) as exc:
        source = "<stdin>" if path is None else str(path)
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else exc
        app.emit(
            failure(
                "run",
                ErrorCode.INPUT_UNAVAILABLE,
                f"Couldn't open '{source}': {reason}",
                path=source,
            )
        )
        raise SystemExit(1) from exc

    if path is None:
        yield stream
        return
    with stream:
        yield stream


@click.command("run", cls=WlCommand, examples=_RUN_EXAMPLES)
@click.argument("sources", nargs=-1, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def run(app: AppContext, sources: tuple[Path, ...]) -> None:
    """Execute @addPages, @addLinks and @isConnected commands.

    Reads FILE, or stdin when no file is given. Prints 1 or 0 for each
    @isConnected query. Errors are reported on stderr and processing
    continues; the exit status is 1 if any command failed.
    """
    with _open_input(app, sources[0] if sources else None) as stream:
        if len(sources) > 1:
            app.emit(
                failure(
                    "run",
                    ErrorCode.TOO_MANY_ARGUMENTS,
                    f"Expected at most one input file, got {len(sources)}",
                    ignored=[str(p) for p in sources[1:]],
                )
            )
        for result in app.interpreter.run(stream):
            app.emit(result)

    raise SystemExit(app.exit_code)
