"""Exceptions module for neo-authn.

Provides the exception hierarchy for neo-authn, split into
authentication failures and collaborator (infrastructure) failures.
"""

from .base import (
    NeoAuthnError,
    ConfigurationError,
    mask_value,
)
from .auth import (
    AuthenticationError,
    InvalidInputError,
)
from .infrastructure import (
    CollaboratorError,
    UserLookupError,
    TokenServiceError,
)

__all__ = [
    # Base
    "NeoAuthnError",
    "ConfigurationError",
    "mask_value",

    # Authentication
    "AuthenticationError",
    "InvalidInputError",

    # Collaborators
    "CollaboratorError",
    "UserLookupError",
    "TokenServiceError",
]
