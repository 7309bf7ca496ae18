"""Exceptions raised by collaborator adapters.

Strategies never raise these themselves; they pass through whatever a
collaborator raises. The reference adapters wrap driver errors into this
hierarchy so callers can catch one family.
"""

from .base import NeoAuthnError


class CollaboratorError(NeoAuthnError):
    """Base exception for failures surfaced by an external collaborator."""
    pass


class UserLookupError(CollaboratorError):
    """Raised when the user store cannot be queried."""
    pass


class TokenServiceError(CollaboratorError):
    """Raised when the token store cannot be reached or read."""
    pass
