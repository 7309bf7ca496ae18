"""Signed JWT token validation with python-jose."""

import logging
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from ...config import AuthnSettings
from ...core.exceptions import ConfigurationError, mask_value
from ...core.value_objects import ServiceScope, TokenInfo, TokenValidationResult

logger = logging.getLogger(__name__)


class JWTTokenService:
    """Token service for JWTs signed with a shared secret.

    The token's ``sub`` claim names the user. When the service is scoped to
    a tenant the tenant claim must match it; when scoped to a user ``sub``
    must match that user. Any decoding or claim failure makes the token
    invalid rather than raising.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        audience: Optional[str] = None,
        scope: Optional[ServiceScope] = None,
        tenant_claim: str = "tenant"
    ):
        if not secret:
            raise ConfigurationError("JWT token service requires a signing secret")
        self._secret = secret
        self._algorithm = algorithm
        self._audience = audience
        self._scope = scope or ServiceScope()
        self._tenant_claim = tenant_claim

    @classmethod
    def from_settings(
        cls,
        settings: AuthnSettings,
        scope: Optional[ServiceScope] = None
    ) -> "JWTTokenService":
        """Create token service from settings."""
        if settings.token_secret is None:
            raise ConfigurationError("AUTHN_TOKEN_SECRET is not configured")
        return cls(
            settings.token_secret.get_secret_value(),
            algorithm=settings.token_algorithm,
            audience=settings.token_audience,
            scope=scope,
            tenant_claim=settings.token_tenant_claim,
        )

    @property
    def scope(self) -> ServiceScope:
        return self._scope

    async def validate_user_token(self, token: str) -> TokenValidationResult:
        """Decode and verify token."""
        if not isinstance(token, str) or not token:
            return TokenValidationResult.invalid()

        claims = self._decode(token)
        if claims is None:
            return TokenValidationResult.invalid()

        user = claims.get("sub")
        info = TokenInfo(user=user if isinstance(user, str) and user else None, claims=claims)

        if self._scope.tenant is not None and claims.get(self._tenant_claim) != self._scope.tenant.value:
            logger.debug(f"Token {mask_value(token, visible=8)} issued for another tenant")
            return TokenValidationResult.invalid(info)

        if self._scope.user_id is not None and info.user != self._scope.user_id:
            logger.debug(f"Token {mask_value(token, visible=8)} issued for another user")
            return TokenValidationResult.invalid(info)

        return TokenValidationResult(valid=True, token_info=info)

    def _decode(self, token: str) -> Optional[Dict[str, Any]]:
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                options={"verify_aud": self._audience is not None},
            )
        except ExpiredSignatureError:
            logger.debug(f"Token {mask_value(token, visible=8)} has expired")
        except JWTError as e:
            logger.debug(f"Token {mask_value(token, visible=8)} failed verification: {e}")
        return None
