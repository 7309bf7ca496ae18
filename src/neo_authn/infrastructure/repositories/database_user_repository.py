"""Database user repository for credential lookups."""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple, Union

import asyncpg

from ...core.exceptions import ConfigurationError, UserLookupError, mask_value
from ...core.value_objects import TenantId, UserPredicate

logger = logging.getLogger(__name__)

SCHEMA_NAME_PATTERN = re.compile(r"^[a-z_][a-z0-9_]{0,62}$")

# Stored record type -> table holding it
RECORD_TABLES = {
    "user": "users",
}

DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def validate_schema_name(schema_name: str) -> str:
    """Validate schema name to prevent SQL injection.

    Args:
        schema_name: Schema name to validate

    Returns:
        Validated schema name

    Raises:
        ConfigurationError: If schema name is not a safe identifier
    """
    if not isinstance(schema_name, str) or not SCHEMA_NAME_PATTERN.match(schema_name):
        raise ConfigurationError(f"Invalid schema name: {schema_name!r}")
    return schema_name


class DatabaseUserRepository:
    """PostgreSQL user store implementing UserLookup and UserResolver.

    Handles ONLY read access to one schema's user table. The global store
    lives in the ``admin`` schema, each tenant in its own ``tenant_<slug>``
    schema.
    """

    def __init__(self, pool: asyncpg.Pool, schema_name: str = "admin"):
        """Initialize database user repository.

        Args:
            pool: asyncpg connection pool
            schema_name: Database schema holding the users table
        """
        if pool is None:
            raise ValueError("Connection pool is required")
        self._pool = pool
        self._schema = validate_schema_name(schema_name)

    @property
    def schema_name(self) -> str:
        return self._schema

    def build_query(self, predicate: UserPredicate, record_type: str) -> Tuple[str, List[Any]]:
        """Compile predicate into a parameterised SELECT.

        Returns:
            SQL text and its positional parameters
        """
        table = RECORD_TABLES.get(record_type)
        if table is None:
            raise ConfigurationError(f"No table configured for record type {record_type!r}")

        regex_operator = "~*" if predicate.identifier_pattern.flags & re.IGNORECASE else "~"
        params: List[Any] = [
            predicate.object_type,
            predicate.identifier_pattern.pattern,
            predicate.password,
        ]
        conditions = [
            "object_type = $1",
            f"(username {regex_operator} $2 OR email {regex_operator} $2)",
            "password = $3",
        ]

        if predicate.min_access_level is not None:
            params.append(predicate.min_access_level)
            conditions.append(f"access_level >= ${len(params)}")

        conditions.append("deleted_at IS NULL")

        sql = (
            f"SELECT * FROM {self._schema}.{table} "
            f"WHERE {' AND '.join(conditions)} "
            "LIMIT 1"
        )
        return sql, params

    async def load_by_predicate(
        self,
        predicate: UserPredicate,
        record_type: str
    ) -> Optional[Dict[str, Any]]:
        """Load the first record matching predicate.

        Raises:
            UserLookupError: If the database cannot be queried
        """
        sql, params = self.build_query(predicate, record_type)

        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(sql, *params)
        except DRIVER_ERRORS as e:
            logger.error(f"Failed to look up user in schema {self._schema}: {e}")
            raise UserLookupError(
                "Failed to retrieve user from database",
                details={"schema": self._schema, "error": str(e)}
            ) from e

        return dict(row) if row else None

    async def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Load a user by platform identifier.

        Raises:
            UserLookupError: If the database cannot be queried
        """
        sql = (
            f"SELECT * FROM {self._schema}.{RECORD_TABLES['user']} "
            "WHERE id::text = $1 AND deleted_at IS NULL"
        )

        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(sql, str(user_id))
        except DRIVER_ERRORS as e:
            logger.error(f"Failed to get user {mask_value(str(user_id))} from schema {self._schema}: {e}")
            raise UserLookupError(
                "Failed to retrieve user from database",
                details={"schema": self._schema, "error": str(e)}
            ) from e

        return dict(row) if row else None


class SchemaTenantLookupProvider:
    """Maps tenants to their own schema's user repository."""

    def __init__(self, pool: asyncpg.Pool, schema_prefix: str = "tenant_"):
        if pool is None:
            raise ValueError("Connection pool is required")
        self._pool = pool
        self._schema_prefix = schema_prefix

    def schema_for(self, tenant: Union[TenantId, str]) -> str:
        """Schema name of tenant, e.g. ``acme-corp`` -> ``tenant_acme_corp``.

        Raises:
            ConfigurationError: If the tenant does not yield a safe schema name
        """
        slug = TenantId.of(tenant).value.lower().replace("-", "_")
        return validate_schema_name(f"{self._schema_prefix}{slug}")

    def for_tenant(self, tenant: TenantId) -> DatabaseUserRepository:
        return DatabaseUserRepository(self._pool, self.schema_for(tenant))
