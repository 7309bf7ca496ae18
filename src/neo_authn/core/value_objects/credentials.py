"""Password credentials value object."""

import math
from dataclasses import dataclass, replace
from numbers import Real
from typing import Any, Mapping, Optional, Sequence, Union

from .identifiers import TenantId

# Accepted mapping keys, preferred name first. The aliases are the
# platform's legacy form field names.
IDENTIFIER_KEYS = ("identifier", "username")
PASSWORD_KEYS = ("password",)
ACCESS_LEVEL_KEYS = ("min_access_level", "access_level")
TENANT_KEYS = ("tenant", "site")

AccessLevel = Union[int, float]


def first_value(data: Mapping[str, Any], keys: Sequence[str]) -> Any:
    """Return the first non-None value among keys in data, else None."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def is_number(value: Any) -> bool:
    """Check whether value is a real number (bools and NaN excluded)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


@dataclass(frozen=True)
class Credentials:
    """Identifier and password pair with optional scoping.

    The password is compared verbatim against the stored value, so any
    hashing must already have been applied by whoever built the object.
    """

    identifier: str
    password: str
    min_access_level: Optional[AccessLevel] = None
    tenant: Optional[TenantId] = None

    def __post_init__(self) -> None:
        """Validate required fields and normalize optional ones."""
        if not isinstance(self.identifier, str):
            raise TypeError("Identifier must be a string")
        if not self.identifier:
            raise ValueError("Identifier cannot be empty")

        if not isinstance(self.password, str):
            raise TypeError("Password must be a string")
        if not self.password:
            raise ValueError("Password cannot be empty")

        # Only numeric levels filter; anything else means "no threshold"
        if not is_number(self.min_access_level):
            object.__setattr__(self, "min_access_level", None)

        if self.tenant is not None and not isinstance(self.tenant, TenantId):
            if not self.tenant:
                object.__setattr__(self, "tenant", None)
            else:
                object.__setattr__(self, "tenant", TenantId.of(self.tenant))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Credentials":
        """Build credentials from a form-like mapping.

        Raises:
            TypeError: If a required field is not a string
            ValueError: If a required field is empty or the tenant is invalid
        """
        return cls(
            identifier=first_value(data, IDENTIFIER_KEYS),
            password=first_value(data, PASSWORD_KEYS),
            min_access_level=first_value(data, ACCESS_LEVEL_KEYS),
            tenant=first_value(data, TENANT_KEYS),
        )

    def with_password(self, password: str) -> "Credentials":
        """Return a copy carrying a different password value."""
        return replace(self, password=password)

    def __repr__(self) -> str:
        """Debug representation (password hidden)."""
        return (
            f"Credentials(identifier={self.identifier!r}, password='***', "
            f"min_access_level={self.min_access_level!r}, tenant={self.tenant!r})"
        )
