"""Core patterns module.

Provides the thread-safe lazy singleton provider.
"""

from .singleton import LazySingletonProvider, ProviderState

__all__ = ["LazySingletonProvider", "ProviderState"]
