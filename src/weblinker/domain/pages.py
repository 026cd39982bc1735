"""Page and Link — the nodes and edges of the page graph.

Pure data types, no infrastructure dependencies.

INVARIANT: ``Page.visited`` is False whenever no traversal is running.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Link:
    """A directed edge, identified by the name of its destination page."""

    target: str


@dataclass(eq=False)
class Page:
    """A uniquely named node with its outgoing links in insertion order."""

    name: str
    position: int
    links: list[Link] = field(default_factory=list)
    visited: bool = False  # traversal scratch space

    @property
    def out_degree(self) -> int:
        return len(self.links)

    def link_to(self, target: str) -> Link:
        """Append a link to *target* and return it."""
        link = Link(target=target)
        self.links.append(link)
        return link

    def targets(self) -> list[str]:
        """Destination names of all outgoing links, in insertion order."""
        return [link.target for link in self.links]
