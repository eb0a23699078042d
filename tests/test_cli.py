from __future__ import annotations

import pytest

from portal.cli import uvicorn_log_level


@pytest.mark.parametrize(
    "level, expected",
    [
        ("INFO", "info"),
        ("WARNING", "warning"),
        ("WARN", "warning"),
        ("FATAL", "critical"),
        (" debug ", "debug"),
        ("verbose", "info"),
        ("", "info"),
    ],
)
def test_uvicorn_log_level(level, expected):
    assert uvicorn_log_level(level) == expected
