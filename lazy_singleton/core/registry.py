"""Keyed registry of lazy singleton providers.

A registry owns a set of named providers so related shared resources can
be declared together, resolved by name, and warmed up eagerly at startup.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from ..config import ProviderConfig
from .exceptions import ConstructionFailure, DuplicateProviderError, UnknownProviderError
from .patterns.singleton import LazySingletonProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Explicitly owned collection of named providers.

    Registration is guarded by a lock; resolution delegates to each
    provider's own double-checked locking. Providers are never removed.

    Example:
        >>> registry = ProviderRegistry()
        >>> _ = registry.register("cache", dict)
        >>> registry.get("cache") is registry.get("cache")
        True
    """

    def __init__(self, config: Optional[ProviderConfig] = None):
        """
        Initialize an empty registry.

        Args:
            config: Default config for providers registered without one
        """
        self._config = config
        self._providers: Dict[str, LazySingletonProvider] = {}
        self._lock = threading.Lock()

    def register(
        self,
        name: str,
        factory: Callable[[], Any],
        config: Optional[ProviderConfig] = None,
    ) -> LazySingletonProvider:
        """
        Register a factory under a name.

        Args:
            name: Unique provider name
            factory: Zero-argument callable producing the shared instance
            config: Provider config (default: the registry's config)

        Returns:
            The newly created provider

        Raises:
            DuplicateProviderError: If the name is already registered
        """
        with self._lock:
            if name in self._providers:
                raise DuplicateProviderError(name)
            provider = LazySingletonProvider(
                factory, name=name, config=config or self._config
            )
            self._providers[name] = provider

        logger.debug(f"Registered provider '{name}'")
        return provider

    def provider(self, name: str) -> LazySingletonProvider:
        """Look up a provider by name, raising UnknownProviderError if absent."""
        try:
            return self._providers[name]
        except KeyError:
            raise UnknownProviderError(name) from None

    def get(self, name: str) -> Any:
        """
        Get the shared instance for a name, constructing it on first use.

        Raises:
            UnknownProviderError: If the name is not registered
            ConstructionFailure: If the factory fails
        """
        return self.provider(name).get_instance()

    def get_if_populated(self, name: str) -> Optional[Any]:
        """
        Get an instance only if it already exists.

        Returns None if the provider hasn't been populated.
        """
        return self.provider(name).peek()

    def initialize_all(self) -> None:
        """
        Construct every registered instance (eager initialization).

        Providers are initialized in registration order. The first
        construction failure is logged and re-raised.
        """
        providers = self._snapshot()
        logger.info(f"Initializing {len(providers)} providers...")

        for provider in providers:
            try:
                provider.get_instance()
            except ConstructionFailure as e:
                logger.error(f"Failed to initialize provider '{provider.name}': {e}")
                raise

        logger.info("All providers initialized")

    def names(self) -> List[str]:
        """Registered names in registration order."""
        with self._lock:
            return list(self._providers)

    def _snapshot(self) -> List[LazySingletonProvider]:
        with self._lock:
            return list(self._providers.values())

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def __repr__(self) -> str:
        populated = sum(1 for p in self._snapshot() if p.is_populated)
        return f"ProviderRegistry(providers={len(self)}, populated={populated})"
