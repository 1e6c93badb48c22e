"""Shared pytest fixtures and test helpers for agecalc tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from agecalc.config.settings import AgeSettings
from agecalc.domain.types import CalendarDate
from agecalc.services.age import AgeService
from agecalc.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def today() -> CalendarDate:
    """Fixed reference date used across domain tests."""
    return CalendarDate(day=10, month=3, year=2024)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no agecalc env overrides.

    Keeps a developer's own ``agecalc.toml`` or ``AGECALC_*`` variables
    from leaking into tests.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AGECALC_CONFIG", raising=False)
    monkeypatch.delenv("AGECALC_TODAY", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Each CLI invocation reconfigures logging; put the previous state back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    app_level = logging.getLogger("agecalc").level
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("agecalc").setLevel(app_level)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """``--verbose`` turns telemetry on process-wide; switch it off after each test."""
    yield
    disable_telemetry()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_settings(tmp_path: Path, **kwargs: Any) -> AgeSettings:
    """Settings rooted at *tmp_path* so no real agecalc.toml is discovered."""
    return AgeSettings.from_cli(start=tmp_path, **kwargs)


def make_service(tmp_path: Path, on: date, **kwargs: Any) -> AgeService:
    """AgeService with a pinned reference date."""
    return AgeService(make_settings(tmp_path, today=on, **kwargs))
