"""Thread-safe lazy singleton provider.

This module provides an explicitly owned provider object that creates a
shared instance on first demand, using double-checked locking so that the
factory completes at most once even under concurrent access.
"""

import logging
import threading
import time
from enum import Enum
from typing import Any, Callable, Generic, Optional, Tuple, Type, TypeVar

from ...config import ProviderConfig, get_provider_config
from ..exceptions import ConstructionFailure
from ..retry import DEFAULT_RETRY_ON, with_construction_retry

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Marks an empty slot; None is a legal payload
_EMPTY: Any = object()


class ProviderState(str, Enum):
    """Lifecycle states of a provider's slot."""
    EMPTY = "empty"
    CONSTRUCTING = "constructing"
    POPULATED = "populated"


class LazySingletonProvider(Generic[T]):
    """Owns one lazily constructed shared instance.

    Implements the double-checked locking pattern: once the slot is
    populated, ``get_instance()`` returns without touching the lock. The
    slot is written only after the factory returns, so no caller can see
    a partially constructed object.

    If the factory raises, the caller gets a ``ConstructionFailure`` and
    the slot stays empty, so a later call retries construction. Once
    populated, the slot is never replaced or cleared.

    Usage:
        provider = LazySingletonProvider(ConnectionPool)

        pool = provider.get_instance()  # constructs on first call
        assert provider.get_instance() is pool

    Attributes:
        name: Label used in logs and errors
        config: Retry and logging configuration
    """

    def __init__(
        self,
        factory: Callable[[], T],
        name: Optional[str] = None,
        config: Optional[ProviderConfig] = None,
        retry_on: Tuple[Type[BaseException], ...] = DEFAULT_RETRY_ON,
    ) -> None:
        """
        Initialize an empty provider.

        Args:
            factory: Zero-argument callable producing the shared instance
            name: Label for logs and errors (default: factory's qualified name)
            config: Provider configuration (default: process-wide config)
            retry_on: Exception types retried when the config allows
                more than one attempt
        """
        if not callable(factory):
            raise TypeError(f"factory must be callable, got {type(factory).__name__}")

        self._factory = factory
        self.name = name if name is not None else getattr(factory, "__qualname__", repr(factory))
        self.config = config if config is not None else get_provider_config()
        self._retry_on = retry_on
        self._lock = threading.Lock()
        self._instance: Any = _EMPTY
        self._state = ProviderState.EMPTY
        self._attempts = 0

    def get_instance(self) -> T:
        """Get the shared instance, constructing it on first call.

        Returns:
            The same object for every caller on every thread.

        Raises:
            ConstructionFailure: If the factory fails. The slot stays empty.
        """
        instance = self._instance
        if instance is not _EMPTY:
            return instance

        with self._lock:
            # Double-check after acquiring lock
            if self._instance is not _EMPTY:
                logger.debug(f"'{self.name}' populated while waiting for lock")
                return self._instance
            self._construct()
            return self._instance

    def _construct(self) -> None:
        """Run the factory and populate the slot. Caller holds the lock."""
        self._state = ProviderState.CONSTRUCTING
        attempts_before = self._attempts
        start_time = time.perf_counter()
        logger.debug(f"Constructing '{self.name}'")

        try:
            instance = with_construction_retry(
                self._invoke_factory, self.config, self._retry_on
            )()
        except Exception as e:
            self._state = ProviderState.EMPTY
            attempts = self._attempts - attempts_before
            logger.error(
                f"Construction of '{self.name}' failed after {attempts} attempt(s): {e}"
            )
            raise ConstructionFailure(self.name, attempts, e) from e
        except BaseException:
            self._state = ProviderState.EMPTY
            raise

        # Publish the object before announcing the populated state
        self._instance = instance
        self._state = ProviderState.POPULATED

        if self.config.log_construction:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.info(f"'{self.name}' constructed in {duration_ms:.2f}ms")

    def _invoke_factory(self) -> T:
        self._attempts += 1
        return self._factory()

    @property
    def state(self) -> ProviderState:
        """Current lifecycle state of the slot."""
        return self._state

    @property
    def is_populated(self) -> bool:
        return self._instance is not _EMPTY

    @property
    def construction_attempts(self) -> int:
        """Number of factory invocations so far, failed ones included."""
        return self._attempts

    def peek(self) -> Optional[T]:
        """Return the instance if populated, else None. Never constructs."""
        instance = self._instance
        return None if instance is _EMPTY else instance

    def __repr__(self) -> str:
        return f"LazySingletonProvider(name={self.name!r}, state={self._state.value})"
