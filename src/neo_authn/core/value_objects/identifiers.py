"""Value objects for identifiers in neo-authn."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TenantId:
    """Tenant identifier value object with basic validation."""
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str):
            raise ValueError("Tenant ID must be a non-empty string")

    @classmethod
    def of(cls, value: Union["TenantId", str]) -> "TenantId":
        """Return value unchanged when it is already a TenantId."""
        if isinstance(value, cls):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.value
