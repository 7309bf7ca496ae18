"""Password encryption protocol contract."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PasswordEncryptor(Protocol):
    """Protocol for the one-way transform applied to submitted passwords.

    The transform must be deterministic so its output can be compared to
    the stored value by equality.
    """

    def encrypt(self, plaintext: str) -> str:
        """Transform a plaintext password into its stored form."""
        ...
