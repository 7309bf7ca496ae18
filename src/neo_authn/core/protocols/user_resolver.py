"""User resolution protocol contract."""

from typing import Optional, Protocol, runtime_checkable

from .user_lookup import UserRecord


@runtime_checkable
class UserResolver(Protocol):
    """Protocol for loading a user by platform identifier."""

    async def get(self, user_id: str) -> Optional[UserRecord]:
        """Load a user by identifier.

        Args:
            user_id: Platform user identifier

        Returns:
            User record, or None if it does not exist
        """
        ...
