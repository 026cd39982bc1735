"""BaseService — shared foundation for weblinker services.

Every service receives the session's :class:`PageGraph` at construction
time. Services sharing a graph see each other's mutations immediately.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weblinker.infrastructure.graph.store import PageGraph


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class StoreService(BaseService):
            def add_page(self, name: str) -> ServiceResult:
                if name in self._graph:
                    ...
    """

    def __init__(self, graph: PageGraph) -> None:
        self._graph = graph

    @property
    def graph(self) -> PageGraph:
        return self._graph
