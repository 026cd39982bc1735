"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the session's page graph and centralizes
result emission (stdout/stderr routing and the error tally that
decides the exit status).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from weblinker.output.formatters import OutputSettings, format_result, is_answer

if TYPE_CHECKING:
    from weblinker.config.settings import WebLinkerSettings
    from weblinker.infrastructure.graph.store import PageGraph
    from weblinker.services.interpreter import InterpreterService
    from weblinker.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The graph and interpreter are created lazily so ``--help`` and
    ``--version`` never build them.
    """

    def __init__(self, settings: WebLinkerSettings) -> None:
        self.settings = settings
        self.errors = 0
        self._graph: PageGraph | None = None
        self._interpreter: InterpreterService | None = None

        from weblinker.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from weblinker.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def graph(self) -> PageGraph:
        """The session's page graph (created on first access)."""
        if self._graph is None:
            from weblinker.infrastructure.graph.store import PageGraph

            self._graph = PageGraph()
        return self._graph

    @property
    def interpreter(self) -> InterpreterService:
        """Interpreter bound to :attr:`graph` and the configured strategy."""
        if self._interpreter is None:
            from weblinker.services.interpreter import InterpreterService

            self._interpreter = InterpreterService(
                self.graph,
                strategy=self.settings.traversal.strategy,
            )
        return self._interpreter

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 0

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult without stopping the run.

        * Reachability answers (and everything in JSON mode) go to stdout.
        * Errors and verbose status lines go to stderr.
        * Every failed result counts towards a non-zero exit status.
        """
        if not result.ok:
            self.errors += 1

        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if output:
            to_stdout = settings.json_output or is_answer(result)
            click.echo(output, err=not to_stdout)
        # In JSON mode, warnings are already in the serialized payload.
        if not (settings.json_output or settings.quiet):
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
