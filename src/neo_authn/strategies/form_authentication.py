"""Form submitted password authentication."""

import logging
from typing import Any, Mapping, Optional

from ..core.exceptions import InvalidInputError
from ..core.protocols import PasswordEncryptor, UserRecord
from ..core.value_objects import Credentials
from .base import AuthenticationStrategy

logger = logging.getLogger(__name__)


class FormAuthentication(AuthenticationStrategy):
    """Authenticates raw form input carrying a plaintext password.

    Encrypts the submitted password once, then hands the input to a
    password matcher. The caller's input is never mutated; the matcher
    receives a copy holding the encrypted value.
    """

    def __init__(self, matcher: AuthenticationStrategy, encryptor: PasswordEncryptor):
        """Initialize strategy.

        Args:
            matcher: Strategy matching already-encrypted credentials,
                normally a PasswordAuthentication
            encryptor: One-way password transform
        """
        if matcher is None:
            raise ValueError("Password matcher is required")
        if encryptor is None:
            raise ValueError("Password encryptor is required")
        self._matcher = matcher
        self._encryptor = encryptor

    async def authenticate(self, form_input: Any) -> Optional[UserRecord]:
        """Encrypt the submitted password and match the result.

        Args:
            form_input: Credentials object or mapping; ``password`` may be
                missing, in which case the matcher rejects the input

        Returns:
            Matching user record or None

        Raises:
            InvalidInputError: If form_input is not an object, or the matcher
                rejects it
        """
        return await self._matcher.authenticate(self.encrypt_input(form_input))

    def encrypt_input(self, form_input: Any) -> Any:
        """Return a copy of form_input with its password encrypted."""
        if isinstance(form_input, Credentials):
            return form_input.with_password(self._encryptor.encrypt(form_input.password))

        if not isinstance(form_input, Mapping):
            raise InvalidInputError.not_an_object(self.name, form_input)

        delegated = dict(form_input)
        password = form_input.get("password")
        if isinstance(password, str) and password:
            delegated["password"] = self._encryptor.encrypt(password)
        else:
            logger.debug("Form input carries no password, delegating unchanged")
        return delegated
