"""Neo-Authn - credential verification for the NeoMultiTenant platform.

Turns a proof of identity into the user it belongs to through three
interchangeable strategies sharing one contract:

- PasswordAuthentication: identifier and stored-form password
- FormAuthentication: identifier and plaintext password from a form
- TokenAuthentication: opaque bearer token

Usage:
    from neo_authn import build_form_authentication, InMemoryUserRepository

    users = InMemoryUserRepository([...])
    form_auth = build_form_authentication(users)
    user = await form_auth.authenticate({"identifier": "bob", "password": "secret"})
"""

from .__version__ import __version__

from .config import AuthnSettings, get_settings, setup_logging
from .core import (
    TenantId,
    Credentials,
    TokenInfo,
    TokenValidationResult,
    UserPredicate,
    NeoAuthnError,
    ConfigurationError,
    AuthenticationError,
    InvalidInputError,
    CollaboratorError,
    UserLookupError,
    TokenServiceError,
    UserLookup,
    TenantUserLookupProvider,
    UserResolver,
    TokenService,
    PasswordEncryptor,
    PatternBuilder,
)
from .core.value_objects import ServiceScope
from .strategies import (
    AuthenticationStrategy,
    PasswordAuthentication,
    FormAuthentication,
    TokenAuthentication,
)
from .infrastructure import (
    CaseInsensitivePatternBuilder,
    HashPasswordEncryptor,
    JWTTokenService,
    RedisTokenService,
    InMemoryUserRepository,
    InMemoryTenantLookupProvider,
    DatabaseUserRepository,
    SchemaTenantLookupProvider,
    build_password_authentication,
    build_form_authentication,
    build_token_authentication,
    create_user_pool,
    build_database_lookups,
    database_user_resolver_factory,
)

__all__ = [
    "__version__",

    # Configuration
    "AuthnSettings",
    "get_settings",
    "setup_logging",

    # Value Objects
    "TenantId",
    "Credentials",
    "ServiceScope",
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

    # Strategies
    "AuthenticationStrategy",
    "PasswordAuthentication",
    "FormAuthentication",
    "TokenAuthentication",

    # Infrastructure
    "CaseInsensitivePatternBuilder",
    "HashPasswordEncryptor",
    "JWTTokenService",
    "RedisTokenService",
    "InMemoryUserRepository",
    "InMemoryTenantLookupProvider",
    "DatabaseUserRepository",
    "SchemaTenantLookupProvider",
    "build_password_authentication",
    "build_form_authentication",
    "build_token_authentication",
    "create_user_pool",
    "build_database_lookups",
    "database_user_resolver_factory",
]
