"""
Shared pytest fixtures for wifi-stats tests.

This module provides fixtures used across multiple test modules.
Fixtures are automatically discovered by pytest.
"""
import logging
import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure project root is in path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.fixtures import sample_data  # noqa: E402
from tests.fixtures.fake_executor import FakeExecutor, ok  # noqa: E402
from wifi_stats.config import Settings, get_settings  # noqa: E402


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def airport_path(tmp_path: Path) -> Path:
    """Location of the airport tool; absent unless a test creates it."""
    return tmp_path / "airport"


@pytest.fixture
def installed_airport(airport_path: Path) -> Path:
    """Create a placeholder airport tool so the availability check passes."""
    airport_path.write_text("#!/bin/sh\n")
    return airport_path


@pytest.fixture
def settings(airport_path: Path) -> Settings:
    """Settings pointing at a temporary airport path with short timeouts."""
    return Settings(
        airport_path=str(airport_path),
        command_timeout=5,
        ping_timeout_grace=2,
        dns_timeout=3,
        speedtest_timeout=10,
        event_sink="none",
        _env_file=None,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to streams that pytest closes after each test."""
    yield
    logger = logging.getLogger("wifi_stats")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


# =============================================================================
# Event Sink Fixtures
# =============================================================================

class RecordingSink:
    """Event sink that keeps every event for assertions."""

    def __init__(self):
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def emit(self, level, event, data=None) -> None:
        self.records.append((level, event, dict(data or {})))

    @property
    def events(self) -> list[str]:
        return [event for _, event, _ in self.records]

    def data_for(self, event: str) -> dict[str, Any]:
        for _, name, data in self.records:
            if name == event:
                return data
        raise KeyError(event)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


# =============================================================================
# Executor Fixtures
# =============================================================================

@pytest.fixture
def executor() -> FakeExecutor:
    """An executor with no programs installed."""
    return FakeExecutor()


@pytest.fixture
def healthy_executor() -> FakeExecutor:
    """An executor where every tool succeeds.

    The airport tool is only reached when `installed_airport` is also used.
    """
    return FakeExecutor(
        {
            "airport": ok(sample_data.AIRPORT_OUTPUT),
            "system_profiler": ok(sample_data.SYSTEM_PROFILER_OUTPUT),
            "route": ok(sample_data.ROUTE_DEFAULT),
            "ping": ok(sample_data.PING_MACOS),
            "scutil": ok(sample_data.SCUTIL_DNS),
            "dig": ok(sample_data.DIG_OUTPUT),
            "networkQuality": ok(sample_data.NETWORK_QUALITY_JSON),
        }
    )
