"""Thread-safe lazy singleton providers."""

from .config import ProviderConfig, get_provider_config
from .core import (
    LazySingletonProvider,
    ProviderState,
    lazy_singleton,
    ProviderRegistry,
    ProviderError,
    ConstructionFailure,
    UnknownProviderError,
    DuplicateProviderError,
)

__version__ = "0.1.0"

__all__ = [
    "ProviderConfig",
    "get_provider_config",
    "LazySingletonProvider",
    "ProviderState",
    "lazy_singleton",
    "ProviderRegistry",
    "ProviderError",
    "ConstructionFailure",
    "UnknownProviderError",
    "DuplicateProviderError",
]
