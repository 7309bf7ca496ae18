"""Collaborator adapters for pattern building, password and token handling."""

from .regex_pattern_builder import CaseInsensitivePatternBuilder
from .hash_password_encryptor import HashPasswordEncryptor, HASH_ALGORITHMS
from .jwt_token_service import JWTTokenService
from .redis_token_service import RedisTokenService

__all__ = [
    "CaseInsensitivePatternBuilder",
    "HashPasswordEncryptor",
    "HASH_ALGORITHMS",
    "JWTTokenService",
    "RedisTokenService",
]
