"""Factories for assembling authentication strategies."""

from .strategy_factory import (
    TokenServiceFactory,
    UserResolverFactory,
    build_password_authentication,
    build_form_authentication,
    build_token_authentication,
    create_user_pool,
    build_database_lookups,
    database_user_resolver_factory,
)

__all__ = [
    "TokenServiceFactory",
    "UserResolverFactory",
    "build_password_authentication",
    "build_form_authentication",
    "build_token_authentication",
    "create_user_pool",
    "build_database_lookups",
    "database_user_resolver_factory",
]
