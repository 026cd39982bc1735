"""Shared pytest fixtures and test helpers for weblinker tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from weblinker.infrastructure.graph.store import PageGraph
from weblinker.services.connectivity import ConnectivityService
from weblinker.services.store import StoreService
from weblinker.services.telemetry import _current_span, disable_telemetry

SCENARIO_PAGES = ["myPage", "UofA", "csDept", "localTheater"]


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry setup done by AppContext during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    wl_level = logging.getLogger("weblinker").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("weblinker").setLevel(wl_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def graph() -> PageGraph:
    """Empty page graph."""
    return PageGraph()


@pytest.fixture
def store(graph: PageGraph) -> StoreService:
    return StoreService(graph)


@pytest.fixture
def connectivity(graph: PageGraph) -> ConnectivityService:
    return ConnectivityService(graph)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no weblinker.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes.
    """
    monkeypatch.delenv("WEBLINKER_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def add_pages(store: StoreService, *names: str) -> None:
    """Add pages via StoreService, asserting success."""
    for name in names:
        result = store.add_page(name)
        assert result.ok, result.error


def add_links(store: StoreService, *edges: tuple[str, str]) -> None:
    """Add links via StoreService, asserting success."""
    for source, target in edges:
        result = store.add_link(source, target)
        assert result.ok, result.error
