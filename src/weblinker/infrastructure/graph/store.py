"""PageGraph — insertion-ordered, in-memory container of pages.

Lives for one interpreter session, no persistence. Pages are keyed
by name in a plain dict, which preserves insertion order; that order
is the order pages are listed and reset.
"""

from __future__ import annotations

from collections.abc import Iterator

from weblinker.domain.pages import Page


class PageGraph:
    """Owns every :class:`Page` of a session."""

    def __init__(self) -> None:
        self._pages: dict[str, Page] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._pages

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages.values())

    def __len__(self) -> int:
        return len(self._pages)

    def __repr__(self) -> str:
        return f"PageGraph(pages={self.page_count()}, links={self.link_count()})"

    def get(self, name: str) -> Page | None:
        """Return the page named *name*, or None."""
        return self._pages.get(name)

    def insert(self, name: str) -> Page:
        """Append a new, unlinked page.

        Raises ValueError if the name is taken. Callers are expected to
        check membership first; this guards the uniqueness invariant.
        """
        if name in self._pages:
            msg = f"Page '{name}' already exists"
            raise ValueError(msg)
        page = Page(name=name, position=len(self._pages))
        self._pages[name] = page
        return page

    def names(self) -> list[str]:
        """Page names in insertion order."""
        return list(self._pages)

    def page_count(self) -> int:
        return len(self._pages)

    def link_count(self) -> int:
        return sum(page.out_degree for page in self._pages.values())
