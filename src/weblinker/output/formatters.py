"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, plain ``1``/``0``
answers) or machines (--json, one JSON object per line). The formatter
layer adapts ServiceResult to the requested output mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weblinker.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def is_answer(result: ServiceResult) -> bool:
    """True for a successful reachability query, the only result printed on stdout."""
    return result.ok and result.op == "is_connected"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Returns an empty string when the result should not be shown in
    the requested mode.
    """
    settings = settings or OutputSettings()

    if settings.json_output:
        return result.model_dump_json(exclude_none=True)

    if settings.quiet:
        from weblinker.output.renderers import render_quiet

        return render_quiet(result)

    if result.ok and not is_answer(result) and not settings.verbose:
        return ""

    from weblinker.output.renderers import render_result

    return render_result(result, verbose=settings.verbose)
