"""
Custom exceptions for lazy singleton providers.
"""

from typing import Any, Dict, Optional


class ProviderError(Exception):
    """Base exception for provider errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConstructionFailure(ProviderError):
    """
    Raised when a provider's factory fails to build the shared instance.

    The original exception is chained as ``__cause__``. The provider's slot
    stays empty, so a later ``get_instance()`` call retries construction.
    """

    def __init__(self, provider_name: str, attempts: int, error: BaseException):
        self.provider_name = provider_name
        self.attempts = attempts
        self.error = error

        message = (
            f"Failed to construct '{provider_name}' after {attempts} attempt(s): "
            f"{type(error).__name__}: {error}"
        )

        super().__init__(
            message=message,
            details={
                "provider_name": provider_name,
                "attempts": attempts,
                "error_type": type(error).__name__,
            },
        )


class UnknownProviderError(ProviderError, KeyError):
    """Raised when a registry lookup names an unregistered provider."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            message=f"No provider registered under '{name}'",
            details={"name": name},
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class DuplicateProviderError(ProviderError, ValueError):
    """Raised when a provider name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            message=f"Provider '{name}' is already registered",
            details={"name": name},
        )
