"""Integration test fixtures and configuration.

This module provides fixtures for integration tests, including:
- A CLI runner whose invocations keep logging inside the test directory
- Helpers for seeding an unreadable data file
"""

import logging
from pathlib import Path
from typing import Iterator
from unittest.mock import patch

import pytest
from click.testing import CliRunner

logger = logging.getLogger(__name__)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path: Path) -> Iterator[None]:
    """Send CLI log files to the test directory instead of ./logs."""
    with patch.dict("os.environ", {"HOSPITAL_LOG_FILE": str(tmp_path / "test.log")}):
        with patch("hospital_records.cli.main.configure_logging"):
            yield


@pytest.fixture
def corrupt_data_file(tmp_path: Path) -> Path:
    """A data file holding truncated JSON."""
    path = tmp_path / "data.json"
    path.write_text('{"patients": [', encoding="utf-8")
    logger.debug(f"Seeded corrupt data file at {path}")
    return path
