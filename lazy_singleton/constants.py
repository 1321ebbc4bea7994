"""Library-wide constants and configuration defaults.

This module centralizes default values and environment variable names
used by the provider configuration.
"""

# =============================================================================
# Environment Variable Names
# =============================================================================
ENV_MAX_ATTEMPTS = "LAZY_SINGLETON_MAX_ATTEMPTS"
ENV_RETRY_MIN_WAIT = "LAZY_SINGLETON_RETRY_MIN_WAIT"
ENV_RETRY_MAX_WAIT = "LAZY_SINGLETON_RETRY_MAX_WAIT"
ENV_LOG_CONSTRUCTION = "LAZY_SINGLETON_LOG_CONSTRUCTION"

# =============================================================================
# Construction Retry Defaults
# =============================================================================
DEFAULT_CONSTRUCTION_MAX_ATTEMPTS = 1  # a single attempt: failures propagate immediately
MAX_CONSTRUCTION_ATTEMPTS_LIMIT = 10
DEFAULT_RETRY_MIN_WAIT_SECONDS = 0.1
DEFAULT_RETRY_MAX_WAIT_SECONDS = 2.0

# =============================================================================
# Logging
# =============================================================================
DEFAULT_LOG_CONSTRUCTION = True
