"""Core authentication domain objects.

Components:
- value_objects: Immutable proofs of identity and lookup predicates
- exceptions: Authentication and collaborator exceptions
- protocols: Contract definitions for external collaborators
"""

from .value_objects import (
    TenantId,
    Credentials,
    TokenInfo,
    TokenValidationResult,
    UserPredicate,
)
from .exceptions import (
    NeoAuthnError,
    ConfigurationError,
    AuthenticationError,
    InvalidInputError,
    CollaboratorError,
    UserLookupError,
    TokenServiceError,
)
from .protocols import (
    UserLookup,
    TenantUserLookupProvider,
    UserResolver,
    TokenService,
    PasswordEncryptor,
    PatternBuilder,
)

__all__ = [
    # Value Objects
    "TenantId",
    "Credentials",
    "TokenInfo",
    "TokenValidationResult",
    "UserPredicate",

    # Exceptions
    "NeoAuthnError",
    "ConfigurationError",
    "AuthenticationError",
    "InvalidInputError",
    "CollaboratorError",
    "UserLookupError",
    "TokenServiceError",

    # Protocols
    "UserLookup",
    "TenantUserLookupProvider",
    "UserResolver",
    "TokenService",
    "PasswordEncryptor",
    "PatternBuilder",
]
