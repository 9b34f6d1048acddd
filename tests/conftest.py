"""Pytest fixtures for tukutil tests."""

import json

import pytest

from tukutil.config import reset_config


@pytest.fixture
def sample_config():
    """Sample config for testing."""
    return {
        "paths": {"codesystem_file": "data/codesystem/codesystem.json"},
        "ids": {"root": "1.2.40.0.13.1.1.3542466645.", "seed_length": 5},
        "time": {"timezone": "Europe/London"},
    }


@pytest.fixture
def fresh_config():
    """Drop the cached config before and after the test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def codesystem_file(tmp_path):
    """Code system JSON file with two entries."""
    path = tmp_path / "codesystem.json"
    path.write_text(json.dumps({"X": "Y", "Z": "W"}), encoding="utf-8")
    return path
