"""Decorator form of the lazy singleton provider."""

import functools
from typing import Callable, Optional, TypeVar

from ..config import ProviderConfig
from .patterns.singleton import LazySingletonProvider

T = TypeVar("T")


def lazy_singleton(
    func: Optional[Callable[[], T]] = None,
    *,
    name: Optional[str] = None,
    config: Optional[ProviderConfig] = None,
):
    """
    Turn a zero-argument factory function into a lazy singleton accessor.

    The returned callable constructs the value on first call and returns
    the same object afterwards. The backing provider is available as
    ``accessor.provider``.

    Usage:
        @lazy_singleton
        def get_client() -> Client:
            return Client()

        @lazy_singleton(name="settings")
        def get_settings() -> Settings:
            return Settings()

    Args:
        func: Factory function when used without arguments
        name: Provider label (default: function's qualified name)
        config: Provider configuration (default: process-wide config)

    Returns:
        The accessor, or a decorator when called with keyword arguments only
    """
    def decorate(factory: Callable[[], T]) -> Callable[[], T]:
        provider = LazySingletonProvider(factory, name=name, config=config)

        @functools.wraps(factory)
        def accessor() -> T:
            return provider.get_instance()

        accessor.provider = provider  # type: ignore[attr-defined]
        return accessor

    if func is not None:
        return decorate(func)
    return decorate
