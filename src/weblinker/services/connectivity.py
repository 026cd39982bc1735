"""ConnectivityService — depth-first reachability between two pages.

Visitation state lives on the pages themselves (``Page.visited``) and
is scratch space for exactly one query: :meth:`is_connected` clears
every flag before returning, on every exit path.

Two strategies walk the graph in the same order (edge insertion
order, first success wins):

* ``iterative`` keeps an explicit stack of edge iterators, so graph
  depth is bounded only by memory.
* ``recursive`` mirrors the textbook definition and is bounded by the
  interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weblinker.domain.types import ErrorCode, TraversalStrategy
from weblinker.services.base import BaseService
from weblinker.services.result import ServiceResult, failure
from weblinker.services.store import StoreService
from weblinker.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from collections.abc import Iterator

    from weblinker.domain.pages import Link, Page
    from weblinker.infrastructure.graph.store import PageGraph

logger = logging.getLogger(__name__)


class ConnectivityService(BaseService):
    """Answers "is *target* reachable from *source*" queries."""

    def __init__(
        self,
        graph: PageGraph,
        *,
        strategy: TraversalStrategy = TraversalStrategy.ITERATIVE,
        store: StoreService | None = None,
    ) -> None:
        super().__init__(graph)
        self.strategy = TraversalStrategy(strategy)
        self.store = store or StoreService(graph)

    @traced
    def is_connected(self, source: str, target: str) -> ServiceResult:
        """Report whether a directed path leads from *source* to *target*.

        A page always reaches itself, even with no outgoing links.
        Pages are resolved through :meth:`StoreService.lookup`.
        Fails with ``UNKNOWN_PAGE`` (and does not traverse) if either
        page is missing.
        """
        op = "is_connected"
        start = self.store.lookup(source)
        missing = [
            name for name in dict.fromkeys((source, target)) if self.store.lookup(name) is None
        ]
        if start is None or missing:
            return failure(
                op,
                ErrorCode.UNKNOWN_PAGE,
                f"Could not find page(s): {', '.join(repr(m) for m in missing)}",
                source=source,
                target=target,
                missing=missing,
            )

        with trace_span("dfs") as span:
            try:
                if self.strategy is TraversalStrategy.RECURSIVE:
                    connected = self._search_recursive(start, target)
                else:
                    connected = self._search_iterative(start, target)
            except RecursionError:
                return failure(
                    op,
                    ErrorCode.TRAVERSAL_TOO_DEEP,
                    "Graph is too deep for the recursive strategy; use 'iterative'",
                    source=source,
                    target=target,
                )
            finally:
                visited = self._reset_visits()
            if span:
                span.annotate("strategy", str(self.strategy))
                span.annotate("visited", visited)

        logger.debug(
            "Traversal %s -> %s: connected=%s, visited=%d",
            source,
            target,
            connected,
            visited,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"source": source, "target": target, "connected": connected},
        )

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _search_recursive(self, page: Page, target: str) -> bool:
        if page.name == target:
            return True
        if page.visited:
            return False
        page.visited = True
        return any(self._search_recursive(self._follow(link), target) for link in page.links)

    def _search_iterative(self, start: Page, target: str) -> bool:
        # Same exploration order as _search_recursive: each stack frame
        # is the remaining edges of one page on the current path.
        if start.name == target:
            return True
        start.visited = True
        stack: list[Iterator[Link]] = [iter(start.links)]
        while stack:
            link = next(stack[-1], None)
            if link is None:
                stack.pop()
                continue
            page = self._follow(link)
            if page.name == target:
                return True
            if page.visited:
                continue
            page.visited = True
            stack.append(iter(page.links))
        return False

    def _follow(self, link: Link) -> Page:
        page = self.store.lookup(link.target)
        if page is None:
            # Links are only created between existing pages.
            msg = f"Dangling link to '{link.target}'"
            raise LookupError(msg)
        return page

    def _reset_visits(self) -> int:
        """Clear every page's visited flag; return how many were set."""
        count = 0
        for page in self._graph:
            if page.visited:
                count += 1
                page.visited = False
        return count
