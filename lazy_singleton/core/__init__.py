"""Core provider, registry and error types."""

from .patterns import LazySingletonProvider, ProviderState
from .decorators import lazy_singleton
from .registry import ProviderRegistry
from .exceptions import (
    ProviderError,
    ConstructionFailure,
    UnknownProviderError,
    DuplicateProviderError,
)

__all__ = [
    # Provider
    "LazySingletonProvider",
    "ProviderState",
    "lazy_singleton",
    "ProviderRegistry",
    # Exceptions
    "ProviderError",
    "ConstructionFailure",
    "UnknownProviderError",
    "DuplicateProviderError",
]
