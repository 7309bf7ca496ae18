"""Token validation protocol contract."""

from typing import Protocol, runtime_checkable

from ..value_objects import TokenValidationResult


@runtime_checkable
class TokenService(Protocol):
    """Protocol for validating opaque user tokens.

    Defines ONLY the validation side; issuing and expiring tokens belongs
    to the service owning them.
    """

    async def validate_user_token(self, token: str) -> TokenValidationResult:
        """Validate token and report which user it belongs to.

        Args:
            token: Opaque token string

        Returns:
            Validation result; unknown or expired tokens yield valid=False

        Raises:
            CollaboratorError: If the token store cannot be consulted
        """
        ...
