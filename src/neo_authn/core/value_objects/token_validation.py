"""Token validation result value objects."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TokenInfo:
    """What a token service knows about a token.

    Only ``user`` is interpreted by the token strategy; ``claims`` carries
    whatever else the service recorded (issue time, scope, tenant, ...).
    """

    user: Optional[str] = None
    claims: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TokenValidationResult:
    """Outcome of asking a token service about a token."""

    valid: bool
    token_info: Optional[TokenInfo] = None

    @property
    def user_id(self) -> Optional[str]:
        """User the token resolves to, or None when it resolves to nobody."""
        if not self.valid or self.token_info is None:
            return None
        return self.token_info.user or None

    @classmethod
    def invalid(cls, token_info: Optional[TokenInfo] = None) -> "TokenValidationResult":
        """Create result for an unknown, expired or malformed token."""
        return cls(valid=False, token_info=token_info)

    @classmethod
    def for_user(cls, user: str, claims: Optional[Dict[str, Any]] = None) -> "TokenValidationResult":
        """Create result for a valid token owned by user."""
        return cls(valid=True, token_info=TokenInfo(user=user, claims=dict(claims or {})))
