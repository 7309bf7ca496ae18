"""One-way password transform using cryptography hash primitives."""

import logging
from typing import Optional

from cryptography.hazmat.primitives import hashes, hmac

from ...config import AuthnSettings
from ...core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

HASH_ALGORITHMS = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}


class HashPasswordEncryptor:
    """Digest-based password encryptor.

    Produces the lowercase hex digest of the UTF-8 password. With a pepper
    the digest is an HMAC keyed by it. The output is deterministic so it can
    be matched against stored values by equality.

    Usage:
        encryptor = HashPasswordEncryptor("sha256")
        stored = encryptor.encrypt("my_password")
    """

    def __init__(self, algorithm: str = "sha256", pepper: Optional[str] = None):
        """
        Initialize encryptor.

        Args:
            algorithm: Digest name, one of sha1 (legacy stores), sha256, sha512
            pepper: Optional secret mixed in through HMAC

        Raises:
            ConfigurationError: If algorithm is not supported
        """
        try:
            self._algorithm = HASH_ALGORITHMS[algorithm.lower()]
        except (KeyError, AttributeError):
            raise ConfigurationError(
                f"Unsupported password hash algorithm: {algorithm!r}",
                details={"supported": sorted(HASH_ALGORITHMS)}
            ) from None

        if algorithm.lower() == "sha1":
            logger.warning("Using sha1 password digests; only suitable for legacy user stores")

        self.algorithm = algorithm.lower()
        self._pepper = pepper.encode("utf-8") if pepper else None

    @classmethod
    def from_settings(cls, settings: AuthnSettings) -> "HashPasswordEncryptor":
        """Create encryptor from settings."""
        pepper = settings.password_pepper.get_secret_value() if settings.password_pepper else None
        return cls(settings.password_hash_algorithm, pepper=pepper)

    def encrypt(self, plaintext: str) -> str:
        """
        Digest a password.

        Args:
            plaintext: Plain text password

        Returns:
            Hex encoded digest
        """
        data = plaintext.encode("utf-8")

        if self._pepper:
            digest = hmac.HMAC(self._pepper, self._algorithm())
        else:
            digest = hashes.Hash(self._algorithm())

        digest.update(data)
        return digest.finalize().hex()
