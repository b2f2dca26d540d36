"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from timemap.core.dates import make_date
from timemap.core.timemap import TimeMap


@pytest.fixture
def golden_dir() -> Path:
    """Directory holding sample schedule files."""
    return Path(__file__).parent / "golden"


@pytest.fixture
def leap_year_map() -> TimeMap:
    """Timeline starting 2020-01-01 advanced by 31, 28 and 31 days."""
    tm = TimeMap(make_date(2020, 1, 1))
    for days in (31, 28, 31):
        tm.add_step(days * 86400)
    return tm
