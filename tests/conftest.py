"""Shared pytest fixtures for nostrscan tests."""

import sys
from pathlib import Path

import pytest

# Add the package to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point config loading at an empty per-test location."""
    config_path = tmp_path / "config" / "nostrscan.json"
    monkeypatch.setenv("NOSTRSCAN_CONFIG", str(config_path))
    return config_path
