"""Unit tests for construction retry helpers."""

import logging

import pytest
from tenacity import RetryCallState

from lazy_singleton.config import ProviderConfig
from lazy_singleton.core.retry import create_construction_retry, with_construction_retry


class TestWithConstructionRetry:
    """Tests for with_construction_retry."""

    def test_single_attempt_returns_function_unchanged(self, single_attempt_config):
        """Test no wrapping happens when retries are disabled."""
        def factory():
            return 1

        assert with_construction_retry(factory, single_attempt_config) is factory

    def test_retries_until_success(self, make_factory, retry_config):
        """Test the wrapped factory is re-invoked after a failure."""
        factory = make_factory(fail_times=2)
        wrapped = with_construction_retry(factory, retry_config)

        assert wrapped().serial == 3
        assert factory.calls == 3

    def test_reraises_last_error(self, make_factory, retry_config):
        """Test the original error is re-raised once attempts are exhausted."""
        factory = make_factory(fail_times=10, error=ConnectionError)
        wrapped = with_construction_retry(factory, retry_config)

        with pytest.raises(ConnectionError):
            wrapped()
        assert factory.calls == 3


class TestCreateConstructionRetry:
    """Tests for create_construction_retry."""

    def test_non_matching_error_not_retried(self, make_factory, retry_config):
        """Test errors outside retry_on propagate after one call."""
        factory = make_factory(fail_times=10, error=ValueError)
        wrapped = create_construction_retry(retry_config, retry_on=(OSError,))(factory)

        with pytest.raises(ValueError):
            wrapped()
        assert factory.calls == 1

    def test_wait_grows_within_configured_bounds(self, make_factory):
        """Test backoff grows exponentially and stays within [min_wait, max_wait]."""
        config = ProviderConfig(
            construction_max_attempts=6, retry_min_wait=0, retry_max_wait=2.0
        )
        factory = make_factory()
        wrapped = create_construction_retry(config)(factory)

        waits = []
        for attempt in range(1, 6):
            state = RetryCallState(wrapped.retry, factory, (), {})
            state.attempt_number = attempt
            waits.append(wrapped.retry.wait(state))

        assert waits == sorted(waits)
        assert waits[0] < waits[-1]
        assert all(config.retry_min_wait <= w <= config.retry_max_wait for w in waits)
        assert waits[-1] == config.retry_max_wait

    def test_retry_sleep_logged_at_warning(self, make_factory, retry_config, caplog):
        """Test a WARNING is logged before the next attempt."""
        factory = make_factory(fail_times=1)
        wrapped = with_construction_retry(factory, retry_config)

        with caplog.at_level(logging.WARNING, logger="lazy_singleton.core.retry"):
            result = wrapped()

        assert result.serial == 2
        warnings = [
            r for r in caplog.records
            if r.name == "lazy_singleton.core.retry" and r.levelno == logging.WARNING
        ]
        assert len(warnings) == 1
        assert "Retrying" in warnings[0].getMessage()
