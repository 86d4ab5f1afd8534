"""Credential value object - salted password hash."""

import hashlib
import hmac
import secrets
from dataclasses import dataclass

from domain.user.core.exceptions.user_errors import PasswordTooShortError

MIN_PASSWORD_LENGTH = 8
DEFAULT_HASH_ITERATIONS = 120_000
SALT_BYTES = 32
ALGORITHM = "pbkdf2_sha256"


def _derive(plaintext: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", plaintext.encode("utf-8"), salt, iterations)


@dataclass(frozen=True)
class Credential:
    """Password credential stored as a PBKDF2-HMAC-SHA256 hash.

    The encoded form is ``pbkdf2_sha256$<iterations>$<salt_hex>$<hash_hex>``,
    so the iteration count travels with the hash and can be raised later
    without invalidating existing credentials.

    Examples:
        >>> cred = Credential.create("correct horse")
        >>> cred.verify("correct horse")
        True
        >>> cred.verify("wrong")
        False
    """

    hash: str

    @staticmethod
    def create(plaintext: str, iterations: int = DEFAULT_HASH_ITERATIONS) -> "Credential":
        """Hash a plaintext password with a fresh random salt.

        Args:
            plaintext: Password chosen by the user
            iterations: PBKDF2 iteration count

        Returns:
            New Credential

        Raises:
            PasswordTooShortError: If password has fewer than 8 characters
        """
        if len(plaintext) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError(MIN_PASSWORD_LENGTH)

        salt = secrets.token_bytes(SALT_BYTES)
        digest = _derive(plaintext, salt, iterations)
        return Credential(f"{ALGORITHM}${iterations}${salt.hex()}${digest.hex()}")

    @staticmethod
    def from_hash(encoded: str) -> "Credential":
        """Wrap a previously stored hash."""
        return Credential(encoded)

    def verify(self, plaintext: str) -> bool:
        """Check a plaintext password against this credential.

        Uses constant-time comparison. Malformed hashes never verify.
        """
        if not plaintext or self.is_empty():
            return False

        try:
            algorithm, iterations, salt_hex, hash_hex = self.hash.split("$")
            if algorithm != ALGORITHM:
                return False
            salt = bytes.fromhex(salt_hex)
            stored = bytes.fromhex(hash_hex)
            computed = _derive(plaintext, salt, int(iterations))
        except (ValueError, TypeError):
            return False

        return hmac.compare_digest(computed, stored)

    def is_empty(self) -> bool:
        """True when no hash is set."""
        return not self.hash

    def __repr__(self) -> str:
        """Never expose the hash in logs."""
        return "Credential('***')"
