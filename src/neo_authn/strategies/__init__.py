"""Authentication strategies.

Each strategy turns one kind of proof into a user:
- PasswordAuthentication: identifier and (already encrypted) password
- FormAuthentication: identifier and plaintext password from a form
- TokenAuthentication: opaque bearer token
"""

from .base import AuthenticationStrategy
from .password_authentication import PasswordAuthentication
from .form_authentication import FormAuthentication
from .token_authentication import TokenAuthentication

__all__ = [
    "AuthenticationStrategy",
    "PasswordAuthentication",
    "FormAuthentication",
    "TokenAuthentication",
]
