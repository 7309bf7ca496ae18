"""In-memory user repository for tests and local development."""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ...core.value_objects import TenantId, UserPredicate

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """Dict-backed user store implementing UserLookup and UserResolver.

    Records are plain mappings keyed by ``id_field``. Predicates are
    evaluated with ``UserPredicate.matches``; the first match in insertion
    order wins.
    """

    def __init__(
        self,
        records: Optional[Iterable[Mapping[str, Any]]] = None,
        id_field: str = "id"
    ):
        self._id_field = id_field
        self._records: Dict[str, Mapping[str, Any]] = {}
        for record in records or ():
            self.add(record)

    def add(self, record: Mapping[str, Any]) -> None:
        """Store or replace a record.

        Raises:
            ValueError: If the record has no identifier
        """
        record_id = record.get(self._id_field)
        if not record_id:
            raise ValueError(f"Record must carry a '{self._id_field}' value")
        self._records[str(record_id)] = record

    def remove(self, record_id: str) -> bool:
        """Remove a record, returning whether it existed."""
        return self._records.pop(record_id, None) is not None

    def __len__(self) -> int:
        return len(self._records)

    async def load_by_predicate(
        self,
        predicate: UserPredicate,
        record_type: str
    ) -> Optional[Mapping[str, Any]]:
        for record in self._records.values():
            if record.get(UserPredicate.TYPE_FIELD) != record_type:
                continue
            if predicate.matches(record):
                return record
        return None

    async def get(self, user_id: str) -> Optional[Mapping[str, Any]]:
        return self._records.get(user_id)


class InMemoryTenantLookupProvider:
    """Keeps one InMemoryUserRepository per tenant.

    Unknown tenants get an empty repository, so they never see records of
    another tenant or of the global store.
    """

    def __init__(self, id_field: str = "id"):
        self._id_field = id_field
        self._repositories: Dict[TenantId, InMemoryUserRepository] = {}

    def repository(self, tenant: Union[TenantId, str]) -> InMemoryUserRepository:
        """Get the repository of tenant, creating it on first use."""
        tenant_id = TenantId.of(tenant)
        if tenant_id not in self._repositories:
            self._repositories[tenant_id] = InMemoryUserRepository(id_field=self._id_field)
        return self._repositories[tenant_id]

    def for_tenant(self, tenant: TenantId) -> InMemoryUserRepository:
        repository = self._repositories.get(TenantId.of(tenant))
        if repository is None:
            logger.debug(f"No users registered for tenant {tenant}")
            return InMemoryUserRepository(id_field=self._id_field)
        return repository
