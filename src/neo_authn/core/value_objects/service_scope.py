"""Collaborator scope value object."""

from dataclasses import dataclass
from typing import Optional

from .identifiers import TenantId


@dataclass(frozen=True)
class ServiceScope:
    """Tenant and user a pair of token collaborators is bound to.

    Either part may be absent: no tenant means the global store, no user
    means tokens of any user are accepted.
    """

    tenant: Optional[TenantId] = None
    user_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.tenant is not None and not isinstance(self.tenant, TenantId):
            object.__setattr__(self, "tenant", TenantId.of(self.tenant))
        if self.user_id is not None and (not isinstance(self.user_id, str) or not self.user_id):
            raise ValueError("Scoped user ID must be a non-empty string")

    @property
    def tenant_key(self) -> str:
        """Tenant value for keys and claims, 'global' when unscoped."""
        return self.tenant.value if self.tenant else "global"
