"""Shared fixtures for latencyviz tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# 2024-01-01T00:00:00Z in epoch milliseconds.
BASE_TS_MS = 1_704_067_200_000


def pytest_configure() -> None:
    # Ensure `src` is importable when running tests from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists():
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def base_ts() -> int:
    return BASE_TS_MS


@pytest.fixture
def scenario_samples() -> list[float]:
    """Small latency batch used by the histogram and report tests."""
    return [10.0, 20.0, 20.0, 30.0, 40.0, 100.0]


@pytest.fixture
def scenario_timestamps(base_ts: int) -> list[int]:
    """One timestamp per minute, aligned with scenario_samples."""
    return [base_ts + i * 60_000 for i in range(6)]
