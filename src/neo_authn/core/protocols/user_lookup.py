"""User lookup protocol contracts."""

from typing import Any, Optional, Protocol, runtime_checkable

from ..value_objects import TenantId, UserPredicate

# Records belong to the storage layer; strategies pass them through untouched.
UserRecord = Any


@runtime_checkable
class UserLookup(Protocol):
    """Protocol for resolving a predicate to at most one stored record.

    Implementations handle a specific store (database schema, memory, ...).
    """

    async def load_by_predicate(
        self,
        predicate: UserPredicate,
        record_type: str
    ) -> Optional[UserRecord]:
        """Load the first record of record_type satisfying predicate.

        Args:
            predicate: Conditions the record must satisfy
            record_type: Stored record type to search

        Returns:
            Matching record, or None when nothing matches
        """
        ...


@runtime_checkable
class TenantUserLookupProvider(Protocol):
    """Protocol for obtaining lookups restricted to a single tenant."""

    def for_tenant(self, tenant: TenantId) -> UserLookup:
        """Return a lookup that only sees records of tenant.

        The returned lookup must not fall back to global records.
        """
        ...
