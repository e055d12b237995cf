"""Shared pytest fixtures for pkgsort tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from pkgsort.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg_logger = logging.getLogger("pkgsort")
    pkg_level = pkg_logger.level
    yield
    disable_telemetry()
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg_logger.setLevel(pkg_level)
