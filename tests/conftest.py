"""Shared test fixtures and configuration."""

import sys
import threading
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lazy_singleton.config import ProviderConfig


ENV_VARS = (
    "LAZY_SINGLETON_MAX_ATTEMPTS",
    "LAZY_SINGLETON_RETRY_MIN_WAIT",
    "LAZY_SINGLETON_RETRY_MAX_WAIT",
    "LAZY_SINGLETON_LOG_CONSTRUCTION",
)


# =============================================================================
# Environment Variable Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Clear provider environment variables."""
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def single_attempt_config():
    """Config with retries disabled."""
    return ProviderConfig(
        construction_max_attempts=1,
        retry_min_wait=0,
        retry_max_wait=0,
        log_construction=True,
    )


@pytest.fixture
def retry_config():
    """Config allowing three attempts with no waiting between them."""
    return ProviderConfig(
        construction_max_attempts=3,
        retry_min_wait=0,
        retry_max_wait=0,
        log_construction=True,
    )


# =============================================================================
# Factory Helpers
# =============================================================================

class Resource:
    """Payload that records how many times it was built."""

    def __init__(self, serial: int):
        self.serial = serial
        self.ready = True


class CountingFactory:
    """Thread-safe factory that counts invocations and can fail on demand."""

    def __init__(self, fail_times: int = 0, error: type = RuntimeError):
        self.calls = 0
        self.fail_times = fail_times
        self.error = error
        self._lock = threading.Lock()

    def __call__(self) -> Resource:
        with self._lock:
            self.calls += 1
            serial = self.calls
        if serial <= self.fail_times:
            raise self.error(f"construction attempt {serial} failed")
        return Resource(serial)


@pytest.fixture
def counting_factory():
    """Factory that always succeeds."""
    return CountingFactory()


@pytest.fixture
def failing_once_factory():
    """Factory that fails on its first call and succeeds afterwards."""
    return CountingFactory(fail_times=1)


@pytest.fixture
def make_factory():
    """Build a CountingFactory with custom failure behaviour."""
    def _make(fail_times: int = 0, error: type = RuntimeError) -> CountingFactory:
        return CountingFactory(fail_times=fail_times, error=error)
    return _make
