# tests/conftest.py

"""Shared pytest fixtures for the property_admin tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs_dir(tmp_path: Path) -> Generator[None, None, None]:
    """Point per-run log files at a temp dir instead of the repo."""
    with patch.object(Settings, "LOGS_DIR", tmp_path / "logs"):
        yield
