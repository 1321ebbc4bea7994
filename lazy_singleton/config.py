"""Provider configuration and process-wide default."""

import logging
import os
import threading
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import (
    DEFAULT_CONSTRUCTION_MAX_ATTEMPTS,
    DEFAULT_LOG_CONSTRUCTION,
    DEFAULT_RETRY_MAX_WAIT_SECONDS,
    DEFAULT_RETRY_MIN_WAIT_SECONDS,
    ENV_LOG_CONSTRUCTION,
    ENV_MAX_ATTEMPTS,
    ENV_RETRY_MAX_WAIT,
    ENV_RETRY_MIN_WAIT,
    MAX_CONSTRUCTION_ATTEMPTS_LIMIT,
)

# Load environment variables from a local .env file, if present
load_dotenv()

logger = logging.getLogger(__name__)


class ProviderConfig(BaseModel):
    """Provider configuration from environment variables.

    Controls how many times a factory is invoked per ``get_instance()``
    call before the failure is surfaced, and whether successful
    construction is logged.

    Numeric environment values are coerced by pydantic, so a malformed
    value (e.g. ``LAZY_SINGLETON_MAX_ATTEMPTS=abc``) raises
    ``ValidationError``.
    """

    construction_max_attempts: int = Field(
        default_factory=lambda: os.getenv(
            ENV_MAX_ATTEMPTS, str(DEFAULT_CONSTRUCTION_MAX_ATTEMPTS)
        ),
        validate_default=True,
        description="Factory invocations per get_instance() call before failing",
    )

    retry_min_wait: float = Field(
        default_factory=lambda: os.getenv(
            ENV_RETRY_MIN_WAIT, str(DEFAULT_RETRY_MIN_WAIT_SECONDS)
        ),
        validate_default=True,
        description="Minimum wait between construction attempts (seconds)",
    )

    retry_max_wait: float = Field(
        default_factory=lambda: os.getenv(
            ENV_RETRY_MAX_WAIT, str(DEFAULT_RETRY_MAX_WAIT_SECONDS)
        ),
        validate_default=True,
        description="Maximum wait between construction attempts (seconds)",
    )

    log_construction: bool = Field(
        default_factory=lambda: os.getenv(
            ENV_LOG_CONSTRUCTION, str(DEFAULT_LOG_CONSTRUCTION)
        ).lower() == "true",
        description="Log successful construction at INFO level",
    )

    @field_validator("construction_max_attempts")
    @classmethod
    def validate_max_attempts(cls, v: int) -> int:
        """Validate attempt count is within a reasonable range."""
        if not 1 <= v <= MAX_CONSTRUCTION_ATTEMPTS_LIMIT:
            raise ValueError(
                f"construction_max_attempts must be between 1 and {MAX_CONSTRUCTION_ATTEMPTS_LIMIT}"
            )
        return v

    @field_validator("retry_min_wait", "retry_max_wait")
    @classmethod
    def validate_wait(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Retry wait must not be negative")
        return v

    @model_validator(mode="after")
    def validate_wait_bounds(self) -> "ProviderConfig":
        if self.retry_max_wait < self.retry_min_wait:
            raise ValueError("retry_max_wait must be >= retry_min_wait")
        return self

    @property
    def retries_enabled(self) -> bool:
        return self.construction_max_attempts > 1


# Global default config (built on first use)
_config: Optional[ProviderConfig] = None
_config_lock = threading.Lock()


def get_provider_config() -> ProviderConfig:
    """
    Get or create the default provider configuration.

    Providers created without an explicit config share this instance.

    Returns:
        ProviderConfig: Configuration read from the environment
    """
    global _config

    if _config is None:
        with _config_lock:
            if _config is None:
                _config = ProviderConfig()
                logger.debug(
                    f"Provider config loaded: max_attempts={_config.construction_max_attempts}, "
                    f"wait={_config.retry_min_wait}-{_config.retry_max_wait}s"
                )

    return _config
