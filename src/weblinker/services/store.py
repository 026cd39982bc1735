"""StoreService — page and link insertion with uniqueness enforcement.

Mutators return ServiceResult and never leave the graph partially
modified: every check runs before the first write.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weblinker.domain.types import ErrorCode
from weblinker.services.base import BaseService
from weblinker.services.result import ServiceResult, failure
from weblinker.services.telemetry import traced

if TYPE_CHECKING:
    from weblinker.domain.pages import Page

logger = logging.getLogger(__name__)


class StoreService(BaseService):
    """Adds pages and links to the graph and looks pages up."""

    @traced
    def add_page(self, name: str) -> ServiceResult:
        """Append a page named *name* after all existing pages.

        Fails with ``DUPLICATE_PAGE`` if the name is already taken.
        """
        op = "add_page"
        if name in self._graph:
            return failure(
                op,
                ErrorCode.DUPLICATE_PAGE,
                f"There is already a page named '{name}'",
                name=name,
            )

        page = self._graph.insert(name)
        logger.debug("Added page %s at position %d", name, page.position)
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": name, "position": page.position},
        )

    @traced
    def add_link(self, source: str, target: str) -> ServiceResult:
        """Append a link from *source* to *target* to the source's edge list.

        Fails with ``UNKNOWN_PAGE`` if either page is missing; in that
        case no link is created.
        """
        op = "add_link"
        src = self._graph.get(source)
        missing = [name for name in dict.fromkeys((source, target)) if name not in self._graph]
        if src is None or missing:
            return failure(
                op,
                ErrorCode.UNKNOWN_PAGE,
                f"Could not find page(s): {', '.join(repr(m) for m in missing)}",
                source=source,
                target=target,
                missing=missing,
            )

        warnings: list[str] = []
        if target in src.targets():
            warnings.append(f"Page '{source}' already links to '{target}'")

        src.link_to(target)
        logger.debug("Linked %s -> %s", source, target)
        return ServiceResult(
            ok=True,
            op=op,
            data={"source": source, "target": target, "out_degree": src.out_degree},
            warnings=warnings,
        )

    def lookup(self, name: str) -> Page | None:
        """Return the page named *name*, or None if it was never added."""
        return self._graph.get(name)
