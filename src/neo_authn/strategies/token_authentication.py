"""Bearer token authentication."""

import logging
from typing import Optional

from ..core.exceptions import mask_value
from ..core.protocols import TokenService, UserRecord, UserResolver
from .base import AuthenticationStrategy

logger = logging.getLogger(__name__)


class TokenAuthentication(AuthenticationStrategy):
    """Resolves an opaque token to the user it was issued for.

    The token service decides whether the token is valid and whom it
    belongs to; the user resolver loads that user. Both are bound to their
    tenant and user scope by whoever builds them, see
    ``build_token_authentication``.
    """

    def __init__(self, token_service: TokenService, user_resolver: UserResolver):
        if token_service is None:
            raise ValueError("Token service is required")
        if user_resolver is None:
            raise ValueError("User resolver is required")
        self._token_service = token_service
        self._user_resolver = user_resolver

    @property
    def token_service(self) -> TokenService:
        return self._token_service

    @property
    def user_resolver(self) -> UserResolver:
        return self._user_resolver

    async def authenticate(self, token: str) -> Optional[UserRecord]:
        """Resolve token to a user.

        An unknown, expired or malformed token, or one that names no user,
        resolves to None. Errors from either collaborator propagate as-is.
        """
        result = await self._token_service.validate_user_token(token)

        user_id = result.user_id if result is not None else None
        if user_id is None:
            logger.debug(f"Token {mask_value(token, visible=8)} resolved to no user")
            return None

        return await self._user_resolver.get(user_id)
