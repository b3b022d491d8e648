"""Pytest configuration for repository test runs."""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source for fallback event ids."""
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _clear_chronoline_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from CHRONOLINE_* variables set in the host shell."""
    for name in (
        "CHRONOLINE_TITLE_HEADLINE",
        "CHRONOLINE_DELIMITER",
        "CHRONOLINE_RANDOM_SEED",
        "CHRONOLINE_TIMELINE_TYPE",
    ):
        monkeypatch.delenv(name, raising=False)
