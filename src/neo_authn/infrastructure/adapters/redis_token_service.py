"""
Redis-backed token validation.

Reads tokens issued by the platform's token service. Each token is stored
under ``{prefix}:{tenant or 'global'}:{token}`` as a JSON document holding
at least ``user`` and optionally ``expires_at`` (epoch seconds).
"""
import json
import logging
import time
from typing import Callable, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ...config import AuthnSettings
from ...core.exceptions import TokenServiceError, mask_value
from ...core.value_objects import ServiceScope, TokenInfo, TokenValidationResult, is_number

logger = logging.getLogger(__name__)


class RedisTokenService:
    """Token service reading token documents from Redis.

    Key expiry is handled by Redis TTLs; ``expires_at`` is checked as well
    so tokens stored without a TTL still expire.
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        *,
        key_prefix: str = "neo_authn:token",
        scope: Optional[ServiceScope] = None,
        clock: Callable[[], float] = time.time
    ):
        if redis_client is None:
            raise ValueError("Redis client is required")
        self._redis = redis_client
        self._key_prefix = key_prefix
        self._scope = scope or ServiceScope()
        self._clock = clock

    @classmethod
    def from_settings(
        cls,
        settings: AuthnSettings,
        scope: Optional[ServiceScope] = None
    ) -> "RedisTokenService":
        """Create token service with a client built from settings."""
        return cls(
            redis.from_url(settings.redis_url),
            key_prefix=settings.token_key_prefix,
            scope=scope,
        )

    @property
    def scope(self) -> ServiceScope:
        return self._scope

    def key_for(self, token: str) -> str:
        """Storage key of token within this service's tenant."""
        return f"{self._key_prefix}:{self._scope.tenant_key}:{token}"

    async def validate_user_token(self, token: str) -> TokenValidationResult:
        """Look up token and check it has not expired.

        Raises:
            TokenServiceError: If Redis cannot be read
        """
        if not isinstance(token, str) or not token:
            return TokenValidationResult.invalid()

        try:
            raw = await self._redis.get(self.key_for(token))
        except RedisError as e:
            raise TokenServiceError(
                "Failed to read token from store",
                details={"token": mask_value(token, visible=8), "error": str(e)}
            ) from e

        if raw is None:
            return TokenValidationResult.invalid()

        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Malformed token document for {mask_value(token, visible=8)}")
            return TokenValidationResult.invalid()

        if not isinstance(data, dict):
            return TokenValidationResult.invalid()

        user = data.get("user")
        info = TokenInfo(user=user if isinstance(user, str) and user else None, claims=data)

        expires_at = data.get("expires_at")
        if expires_at is not None and (not is_number(expires_at) or expires_at <= self._clock()):
            return TokenValidationResult.invalid(info)

        if self._scope.user_id is not None and info.user != self._scope.user_id:
            return TokenValidationResult.invalid(info)

        return TokenValidationResult(valid=True, token_info=info)
