"""Authentication strategy contract."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..core.protocols import UserRecord


class AuthenticationStrategy(ABC):
    """Decides which user, if any, a proof of identity belongs to.

    Every strategy completes exactly once per call: it raises when the
    proof is malformed or a collaborator fails, and otherwise returns the
    matching user record or None when nothing matches. Callers pick the
    strategy for the kind of proof they hold and treat all strategies
    interchangeably.
    """

    @property
    def name(self) -> str:
        """Strategy name used in error messages and logs."""
        return type(self).__name__

    @abstractmethod
    async def authenticate(self, proof: Any) -> Optional[UserRecord]:
        """Resolve proof to a user.

        Args:
            proof: Strategy-specific proof of identity

        Returns:
            Matching user record, or None when the proof matches nobody

        Raises:
            InvalidInputError: If proof is malformed
            Exception: Any collaborator error, unmodified
        """
        ...
