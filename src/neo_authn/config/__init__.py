"""Configuration for neo-authn."""

from .settings import AuthnSettings, SUPPORTED_HASH_ALGORITHMS, get_settings
from .logging_config import (
    LoggingConfig,
    LogFormat,
    LogLevel,
    LogVerbosity,
    setup_logging,
)

__all__ = [
    "AuthnSettings",
    "SUPPORTED_HASH_ALGORITHMS",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "setup_logging",
]
