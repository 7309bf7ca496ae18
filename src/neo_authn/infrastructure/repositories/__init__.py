"""User repositories implementing the lookup and resolver protocols."""

from .memory_user_repository import InMemoryUserRepository, InMemoryTenantLookupProvider
from .database_user_repository import (
    DatabaseUserRepository,
    SchemaTenantLookupProvider,
    validate_schema_name,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryTenantLookupProvider",
    "DatabaseUserRepository",
    "SchemaTenantLookupProvider",
    "validate_schema_name",
]
