"""Infrastructure for neo-authn.

- adapters/: pattern builder, password encryptor and token services
- repositories/: in-memory and PostgreSQL user stores
- factories/: strategy wiring
"""

from .adapters import (
    CaseInsensitivePatternBuilder,
    HashPasswordEncryptor,
    JWTTokenService,
    RedisTokenService,
)
from .repositories import (
    InMemoryUserRepository,
    InMemoryTenantLookupProvider,
    DatabaseUserRepository,
    SchemaTenantLookupProvider,
)
from .factories import (
    build_password_authentication,
    build_form_authentication,
    build_token_authentication,
    create_user_pool,
    build_database_lookups,
    database_user_resolver_factory,
)

__all__ = [
    # Adapters
    "CaseInsensitivePatternBuilder",
    "HashPasswordEncryptor",
    "JWTTokenService",
    "RedisTokenService",

    # Repositories
    "InMemoryUserRepository",
    "InMemoryTenantLookupProvider",
    "DatabaseUserRepository",
    "SchemaTenantLookupProvider",

    # Factories
    "build_password_authentication",
    "build_form_authentication",
    "build_token_authentication",
    "create_user_pool",
    "build_database_lookups",
    "database_user_resolver_factory",
]
