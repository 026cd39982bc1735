"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to the mutation renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from weblinker.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from weblinker.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_answer(result: ServiceResult) -> str:
    """Render a reachability answer as ``1`` or ``0``."""
    return "1" if result.data.get("connected") else "0"


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    if result.ok and result.op == "is_connected":
        return render_answer(result)

    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_mutation)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: answers only."""
    if result.ok and result.op == "is_connected":
        return render_answer(result)
    return ""


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = "wl.page" if key in ("name", "source", "target") else ""
    console.print(Text.assemble((f"  {key}: ", "wl.key"), (str(value), style)))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="wl.error")
    op = Text(f"  {result.op}", style="wl.op")
    console.print(label, op, Text("—"), Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    label = Text("OK", style="wl.ok")
    op = Text(f"  {result.op}", style="wl.op")
    console.print(label, op)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_add_link(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    label = Text("OK", style="wl.ok")
    op = Text(f"  {result.op}", style="wl.op")
    edge = Text.assemble(
        "  ",
        (str(result.data.get("source", "?")), "wl.page"),
        " -> ",
        (str(result.data.get("target", "?")), "wl.page"),
    )
    console.print(label, op, end="")
    console.print(edge)
    if verbose:
        _field(console, "out_degree", result.data.get("out_degree", 0))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "add_page": _render_mutation,
    "add_link": _render_add_link,
}
