"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


# Complete test environment that overrides every SEEKR_* setting
TEST_ENV = {
    "SEEKR_DEFAULT_MODE": "",
    "SEEKR_CASE_SENSITIVE": "false",
    "SEEKR_DEEP": "false",
    "SEEKR_LOG_LEVEL": "info",
    "SEEKR_LOG_JSON": "true",
    "SEEKR_METRICS_ENABLED": "true",
    "SEEKR_TRACING_ENABLED": "false",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value

from seekr.config import Settings, reset_settings
from seekr.options import SearchOptions


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset SEEKR_* variables and the cached settings before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    """Settings with telemetry switched off."""
    return Settings(metrics_enabled=False, tracing_enabled=False)


@pytest.fixture
def users():
    """Records with nested, missing and null properties."""
    return [
        {"id": 1, "name": "Ann", "role": "admin", "profile": {"city": "Oslo", "tags": ["a", "b"]}},
        {"id": 2, "name": "bob", "role": "user", "profile": {"city": "Lima"}},
        {"id": 3, "name": "ANN", "role": "user", "profile": None},
        {"id": 4, "name": "Cid", "role": None},
        {"id": 5, "name": "Ann", "role": "user", "profile": {"city": "oslo"}},
    ]


@pytest.fixture
def exact():
    return SearchOptions(mode="exact")
