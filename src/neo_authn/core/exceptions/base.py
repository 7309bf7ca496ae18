"""Base exceptions for neo-authn.

This module defines the root of the neo-authn exception hierarchy.
All exceptions carry an error code and structured details so callers
can log or translate them without parsing messages.
"""

from typing import Any, Dict, Optional


class NeoAuthnError(Exception):
    """Base exception for all neo-authn errors.

    All exceptions in the neo-authn library inherit from this base class
    and include structured error information for better debugging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(NeoAuthnError):
    """Raised when settings or adapter configuration is invalid."""
    pass


def mask_value(value: Optional[str], visible: int = 2) -> str:
    """Mask a sensitive value for error details and logs.

    Args:
        value: Identifier or token to mask
        visible: Number of characters kept at each end

    Returns:
        Masked representation, "***" for short values
    """
    if not isinstance(value, str) or len(value) <= visible * 2:
        return "***"
    return f"{value[:visible]}...{value[-visible:]}"
