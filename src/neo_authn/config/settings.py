"""
Configuration for neo-authn collaborators.

Settings are read from the environment (prefix ``AUTHN_``) or a ``.env``
file. Strategies take no settings themselves; the factories use these to
build the reference collaborators.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

SUPPORTED_HASH_ALGORITHMS = ("sha1", "sha256", "sha512")


class AuthnSettings(BaseSettings):
    """Settings for password hashing, token validation and user storage."""

    model_config = SettingsConfigDict(
        env_prefix="AUTHN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True
    )

    # Password transform
    password_hash_algorithm: str = Field(default="sha256")
    password_pepper: Optional[SecretStr] = Field(default=None)

    # Signed token validation
    token_secret: Optional[SecretStr] = Field(default=None)
    token_algorithm: str = Field(default="HS256")
    token_audience: Optional[str] = Field(default=None)
    token_tenant_claim: str = Field(default="tenant")

    # Token store
    redis_url: str = Field(default="redis://localhost:6379/0")
    token_key_prefix: str = Field(default="neo_authn:token")

    # User store
    database_dsn: Optional[str] = Field(default=None)
    db_pool_min_size: int = Field(default=1, ge=1)
    db_pool_max_size: int = Field(default=10, ge=1)
    db_command_timeout: float = Field(default=10.0, gt=0)
    global_schema: str = Field(default="admin")
    tenant_schema_prefix: str = Field(default="tenant_")

    @field_validator("password_hash_algorithm")
    @classmethod
    def _validate_hash_algorithm(cls, value: str) -> str:
        normalized = value.lower()
        if normalized not in SUPPORTED_HASH_ALGORITHMS:
            raise ValueError(
                f"Unsupported password hash algorithm '{value}', "
                f"expected one of {', '.join(SUPPORTED_HASH_ALGORITHMS)}"
            )
        return normalized


@lru_cache()
def get_settings() -> AuthnSettings:
    """Get cached settings instance."""
    settings = AuthnSettings()
    logger.debug(
        f"Loaded authn settings: hash={settings.password_hash_algorithm}, "
        f"token_algorithm={settings.token_algorithm}, global_schema={settings.global_schema}"
    )
    return settings
