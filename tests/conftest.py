"""Shared pytest fixtures for relwatch tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from relwatch.domain.options import Options, OptionsBase, new_defaults, new_options


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    relwatch = logging.getLogger("relwatch")
    relwatch_level = relwatch.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    relwatch.setLevel(relwatch_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ``RELWATCH_*`` variables out of settings under test."""
    for name in ("RELWATCH_HARD_DEFAULTS__INTERVAL", "RELWATCH_HARD_DEFAULTS__SEMANTIC_VERSIONING"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def defaults() -> OptionsBase:
    """Service-scoped Defaults layer."""
    return new_defaults("1m10s", False)


@pytest.fixture
def hard_defaults() -> OptionsBase:
    """Global HardDefaults layer."""
    return new_defaults("10m", True)


@pytest.fixture
def options(defaults: OptionsBase, hard_defaults: OptionsBase) -> Options:
    """Root Options with nothing set and both layers attached."""
    return new_options(defaults=defaults, hard_defaults=hard_defaults)
