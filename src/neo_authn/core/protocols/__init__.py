"""Authentication collaborator protocols.

Contract definitions for the external services the strategies rely on.
Each protocol defines exactly one collaborator capability.
"""

from .user_lookup import UserLookup, TenantUserLookupProvider, UserRecord
from .user_resolver import UserResolver
from .token_service import TokenService
from .password_encryptor import PasswordEncryptor
from .pattern_builder import PatternBuilder

__all__ = [
    "UserLookup",
    "TenantUserLookupProvider",
    "UserRecord",
    "UserResolver",
    "TokenService",
    "PasswordEncryptor",
    "PatternBuilder",
]
