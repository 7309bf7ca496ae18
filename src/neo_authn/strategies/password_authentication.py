"""Identifier and password authentication."""

import logging
from typing import Any, Mapping, Optional

from ..core.exceptions import ConfigurationError, InvalidInputError, mask_value
from ..core.protocols import (
    PatternBuilder,
    TenantUserLookupProvider,
    UserLookup,
    UserRecord,
)
from ..core.value_objects import (
    Credentials,
    IDENTIFIER_KEYS,
    PASSWORD_KEYS,
    USER_OBJECT_TYPE,
    UserPredicate,
    first_value,
)
from .base import AuthenticationStrategy

logger = logging.getLogger(__name__)


class PasswordAuthentication(AuthenticationStrategy):
    """Matches an identifier (username or email) and password to a user.

    The submitted password is compared to the stored one by equality. This
    strategy never hashes: callers holding plaintext go through
    FormAuthentication, callers that already hashed call it directly.
    """

    def __init__(
        self,
        lookup: UserLookup,
        pattern_builder: PatternBuilder,
        tenant_lookups: Optional[TenantUserLookupProvider] = None
    ):
        """Initialize strategy with its collaborators.

        Args:
            lookup: Global user lookup, used when no tenant is given
            pattern_builder: Builds the case-insensitive identifier pattern
            tenant_lookups: Provides tenant-restricted lookups
        """
        if lookup is None:
            raise ValueError("User lookup is required")
        if pattern_builder is None:
            raise ValueError("Pattern builder is required")
        self._lookup = lookup
        self._pattern_builder = pattern_builder
        self._tenant_lookups = tenant_lookups

    async def authenticate(self, credentials: Any) -> Optional[UserRecord]:
        """Find the user the credentials belong to.

        Args:
            credentials: Credentials object or mapping with ``identifier``
                and ``password`` plus optional ``min_access_level`` and
                ``tenant``

        Returns:
            Matching user record or None

        Raises:
            InvalidInputError: If identifier or password is missing
        """
        parsed = self.parse_credentials(credentials)
        predicate = self.build_predicate(parsed)
        lookup = self._select_lookup(parsed)

        logger.debug(
            f"Looking up user {mask_value(parsed.identifier)} "
            f"(tenant={parsed.tenant}, min_access_level={parsed.min_access_level})"
        )
        return await lookup.load_by_predicate(predicate, USER_OBJECT_TYPE)

    def parse_credentials(self, credentials: Any) -> Credentials:
        """Validate the proof and return it as a Credentials object.

        Raises:
            InvalidInputError: If the proof is not a credentials object or a
                required field is missing, empty or not a string
        """
        if isinstance(credentials, Credentials):
            return credentials

        if not isinstance(credentials, Mapping):
            raise InvalidInputError.not_an_object(self.name, credentials)

        for field, keys in (("identifier", IDENTIFIER_KEYS), ("password", PASSWORD_KEYS)):
            value = first_value(credentials, keys)
            if not isinstance(value, str) or not value:
                raise InvalidInputError.missing_field(self.name, field)

        try:
            return Credentials.from_mapping(credentials)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"{self.name}: {e}", strategy=self.name) from e

    def build_predicate(self, credentials: Credentials) -> UserPredicate:
        """Build the lookup predicate for validated credentials."""
        return UserPredicate(
            identifier_pattern=self._pattern_builder.case_insensitive_exact(credentials.identifier),
            password=credentials.password,
            object_type=USER_OBJECT_TYPE,
            min_access_level=credentials.min_access_level,
        )

    def _select_lookup(self, credentials: Credentials) -> UserLookup:
        if credentials.tenant is None:
            return self._lookup

        if self._tenant_lookups is None:
            raise ConfigurationError(
                f"{self.name}: credentials are scoped to tenant '{credentials.tenant}' "
                "but no tenant lookup provider is configured"
            )
        return self._tenant_lookups.for_tenant(credentials.tenant)
