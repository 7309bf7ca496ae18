"""Authentication-specific exceptions for neo-authn."""

from typing import Any, Dict, Optional

from .base import NeoAuthnError


class AuthenticationError(NeoAuthnError):
    """Base exception for authentication errors."""
    pass


class InvalidInputError(AuthenticationError):
    """Raised when a proof of identity is malformed or incomplete.

    Raised before any collaborator is consulted. This is a caller error,
    not a "no match" outcome.
    """

    def __init__(
        self,
        message: str,
        *,
        strategy: Optional[str] = None,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        context = dict(details or {})
        if strategy:
            context["strategy"] = strategy
        if field:
            context["field"] = field
        super().__init__(message, details=context)
        self.strategy = strategy
        self.field = field

    @classmethod
    def not_an_object(cls, strategy: str, proof: Any) -> "InvalidInputError":
        """Create exception for a proof that is not a credentials object."""
        return cls(
            f"{strategy}: credentials must be passed as an object, got {type(proof).__name__}",
            strategy=strategy,
        )

    @classmethod
    def missing_field(cls, strategy: str, field: str) -> "InvalidInputError":
        """Create exception for a missing or non-string required field."""
        return cls(
            f"{strategy}: '{field}' must be passed as part of the credentials object",
            strategy=strategy,
            field=field,
        )
