"""Factories wiring authentication strategies to their collaborators."""

import logging
from typing import Callable, Optional, Tuple

import asyncpg

from ...config import AuthnSettings, get_settings
from ...core.exceptions import ConfigurationError
from ...core.protocols import (
    PasswordEncryptor,
    PatternBuilder,
    TenantUserLookupProvider,
    TokenService,
    UserLookup,
    UserResolver,
)
from ...core.value_objects import ServiceScope
from ...strategies import FormAuthentication, PasswordAuthentication, TokenAuthentication
from ..adapters import CaseInsensitivePatternBuilder, HashPasswordEncryptor
from ..repositories import DatabaseUserRepository, SchemaTenantLookupProvider

logger = logging.getLogger(__name__)

TokenServiceFactory = Callable[[ServiceScope], TokenService]
UserResolverFactory = Callable[[ServiceScope], UserResolver]


def build_password_authentication(
    lookup: UserLookup,
    tenant_lookups: Optional[TenantUserLookupProvider] = None,
    pattern_builder: Optional[PatternBuilder] = None
) -> PasswordAuthentication:
    """Create a password strategy, defaulting to the regex pattern builder."""
    return PasswordAuthentication(
        lookup,
        pattern_builder or CaseInsensitivePatternBuilder(),
        tenant_lookups=tenant_lookups,
    )


def build_form_authentication(
    lookup: UserLookup,
    tenant_lookups: Optional[TenantUserLookupProvider] = None,
    encryptor: Optional[PasswordEncryptor] = None,
    pattern_builder: Optional[PatternBuilder] = None,
    settings: Optional[AuthnSettings] = None
) -> FormAuthentication:
    """Create a form strategy around a freshly built password strategy.

    Without an explicit encryptor, a HashPasswordEncryptor is built from
    settings (or the cached environment settings).
    """
    if encryptor is None:
        encryptor = HashPasswordEncryptor.from_settings(settings or get_settings())

    matcher = build_password_authentication(lookup, tenant_lookups, pattern_builder)
    return FormAuthentication(matcher, encryptor)


def build_token_authentication(
    scope: ServiceScope,
    token_service_factory: TokenServiceFactory,
    user_resolver_factory: UserResolverFactory
) -> TokenAuthentication:
    """Create a token strategy whose collaborators share one scope.

    Args:
        scope: Tenant and user both collaborators are bound to
        token_service_factory: Builds the token service for a scope
        user_resolver_factory: Builds the user resolver for a scope
    """
    return TokenAuthentication(
        token_service_factory(scope),
        user_resolver_factory(scope),
    )


async def create_user_pool(settings: Optional[AuthnSettings] = None) -> asyncpg.Pool:
    """Create the asyncpg pool backing the database repositories.

    Raises:
        ConfigurationError: If no database DSN is configured
    """
    settings = settings or get_settings()
    if not settings.database_dsn:
        raise ConfigurationError("AUTHN_DATABASE_DSN is not configured")

    logger.info(
        f"Creating user store pool (min={settings.db_pool_min_size}, max={settings.db_pool_max_size})"
    )
    return await asyncpg.create_pool(
        dsn=settings.database_dsn,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
    )


def build_database_lookups(
    pool: asyncpg.Pool,
    settings: Optional[AuthnSettings] = None
) -> Tuple[DatabaseUserRepository, SchemaTenantLookupProvider]:
    """Create the global repository and the per-tenant provider over pool."""
    settings = settings or get_settings()
    return (
        DatabaseUserRepository(pool, settings.global_schema),
        SchemaTenantLookupProvider(pool, settings.tenant_schema_prefix),
    )


def database_user_resolver_factory(
    pool: asyncpg.Pool,
    settings: Optional[AuthnSettings] = None
) -> UserResolverFactory:
    """Resolver factory reading users from the scope's tenant schema."""
    global_repository, tenant_lookups = build_database_lookups(pool, settings)

    def factory(scope: ServiceScope) -> UserResolver:
        if scope.tenant is None:
            return global_repository
        return tenant_lookups.for_tenant(scope.tenant)

    return factory
