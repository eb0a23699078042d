from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Make the portal package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portal.core.config import Settings  # noqa: E402

from helpers import StepClock, make_settings  # noqa: E402


@pytest.fixture()
def data_file(tmp_path) -> Path:
    return tmp_path / "users.json"


@pytest.fixture()
def settings(data_file) -> Settings:
    return make_settings(data_file=str(data_file))


@pytest.fixture()
def frozen_clock() -> StepClock:
    return StepClock(datetime(2024, 5, 1, 10, 20, 30, 123000, tzinfo=timezone.utc))
