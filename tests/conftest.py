"""Shared pytest fixtures and test helpers for gildedrose tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from gildedrose.domain.items import Item
from gildedrose.domain.samples import sample_inventory


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and package logger state after each test.

    CLI invocations reconfigure logging against the runner's captured
    stderr; later tests must not write to that closed stream.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("gildedrose")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def inventory() -> list[Item]:
    """Fresh copy of the sample inventory."""
    return sample_inventory()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def advance(name: str, sell_in: int, quality: int, days: int = 1) -> Item:
    """Build a single item and run *days* daily updates on it."""
    from gildedrose.domain.update import update_quality

    item = Item(name, sell_in, quality)
    for _ in range(days):
        update_quality([item])
    return item
