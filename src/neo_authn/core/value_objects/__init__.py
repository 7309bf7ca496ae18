"""Authentication value objects.

Immutable value objects describing proofs of identity and the queries
built from them.
"""

from .identifiers import TenantId
from .credentials import (
    Credentials,
    IDENTIFIER_KEYS,
    PASSWORD_KEYS,
    ACCESS_LEVEL_KEYS,
    TENANT_KEYS,
    first_value,
    is_number,
)
from .token_validation import TokenInfo, TokenValidationResult
from .user_predicate import UserPredicate, USER_OBJECT_TYPE
from .service_scope import ServiceScope

__all__ = [
    "TenantId",
    "Credentials",
    "IDENTIFIER_KEYS",
    "PASSWORD_KEYS",
    "ACCESS_LEVEL_KEYS",
    "TENANT_KEYS",
    "first_value",
    "is_number",
    "TokenInfo",
    "TokenValidationResult",
    "UserPredicate",
    "USER_OBJECT_TYPE",
    "ServiceScope",
]
