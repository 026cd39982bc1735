"""InterpreterService — run command lines against one page graph.

Each line yields one ServiceResult per graph operation it performs.
Failures never stop the run: they are yielded like any other result
and counted in :attr:`InterpreterService.errors`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from weblinker.domain.commands import Command, CommandSyntaxError, parse_command
from weblinker.domain.types import CommandKeyword, ErrorCode, TraversalStrategy
from weblinker.services.base import BaseService
from weblinker.services.connectivity import ConnectivityService
from weblinker.services.result import ServiceResult, failure
from weblinker.services.store import StoreService

if TYPE_CHECKING:
    from weblinker.infrastructure.graph.store import PageGraph

logger = logging.getLogger(__name__)


class InterpreterService(BaseService):
    """Dispatches ``@addPages``, ``@addLinks`` and ``@isConnected`` lines."""

    def __init__(
        self,
        graph: PageGraph,
        *,
        strategy: TraversalStrategy = TraversalStrategy.ITERATIVE,
    ) -> None:
        super().__init__(graph)
        self.store = StoreService(graph)
        self.connectivity = ConnectivityService(graph, strategy=strategy, store=self.store)
        self.errors = 0
        self.lines = 0

    def run(self, lines: Iterable[str]) -> Iterator[ServiceResult]:
        """Execute every line in order, yielding results as they are produced."""
        for line in lines:
            yield from self.execute(line)

    def execute(self, line: str) -> list[ServiceResult]:
        """Execute a single command line.

        Blank lines produce no results. A malformed line produces a
        single ``MALFORMED_COMMAND`` result and performs no operation.
        """
        self.lines += 1
        try:
            command = parse_command(line)
        except CommandSyntaxError as exc:
            logger.debug("Skipping line %d: %s", self.lines, exc)
            results = [
                failure(
                    "parse",
                    ErrorCode.MALFORMED_COMMAND,
                    str(exc),
                    line=exc.line.rstrip("\n"),
                    lineno=self.lines,
                )
            ]
        else:
            results = [] if command is None else self._dispatch(command)

        self.errors += sum(1 for result in results if not result.ok)
        return results

    @property
    def ok(self) -> bool:
        """True while no executed operation has failed."""
        return self.errors == 0

    def _dispatch(self, command: Command) -> list[ServiceResult]:
        if command.keyword is CommandKeyword.ADD_PAGES:
            return [self.store.add_page(name) for name in command.args]
        if command.keyword is CommandKeyword.ADD_LINKS:
            source, *targets = command.args
            return [self.store.add_link(source, target) for target in targets]
        source, target = command.args
        return [self.connectivity.is_connected(source, target)]
