"""
Construction retry helpers.

Provides:
- Retry decorator factory for provider factories
- Default set of retryable exception types
"""

import logging
from typing import Callable, Tuple, Type, TypeVar

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from ..config import ProviderConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Retry any ordinary error raised by a factory
DEFAULT_RETRY_ON: Tuple[Type[BaseException], ...] = (Exception,)


def create_construction_retry(
    config: ProviderConfig,
    retry_on: Tuple[Type[BaseException], ...] = DEFAULT_RETRY_ON,
):
    """
    Create a tenacity retry decorator for factory invocations.

    Args:
        config: Provider configuration supplying attempts and wait bounds
        retry_on: Exception types that trigger another attempt

    Returns:
        Configured retry decorator. The last error is re-raised unchanged
        once attempts are exhausted.
    """
    return retry(
        stop=stop_after_attempt(config.construction_max_attempts),
        wait=wait_exponential(
            multiplier=1,
            min=config.retry_min_wait,
            max=config.retry_max_wait,
        ),
        retry=retry_if_exception_type(retry_on),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def with_construction_retry(
    func: Callable[[], T],
    config: ProviderConfig,
    retry_on: Tuple[Type[BaseException], ...] = DEFAULT_RETRY_ON,
) -> Callable[[], T]:
    """
    Wrap a zero-argument factory with retry logic.

    Returns ``func`` untouched when the config allows a single attempt.
    """
    if not config.retries_enabled:
        return func
    return create_construction_retry(config, retry_on)(func)
