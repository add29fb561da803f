"""
Password Hasher

One-way bcrypt hashing of account passwords.

Security:
    - Fresh random salt per hash, work factor taken from config
    - Comparison is done by bcrypt.checkpw (constant time)
    - Plaintext and digests are never logged
"""

import asyncio

import bcrypt

# bcrypt only consumes the first 72 bytes of the secret
BCRYPT_MAX_BYTES = 72

_DUMMY_PASSWORD = b"dummy_password"


class InvalidInputError(ValueError):
    """Raised when asked to hash or verify an empty password"""


class HashingError(Exception):
    """Raised when the bcrypt primitive fails, e.g. on a corrupt stored digest"""


class PasswordHasher:
    """
    Credential hasher backed by bcrypt.

    The sync methods are CPU bound. Request handlers must use the ``*_async``
    variants, which run the work on a worker thread so the event loop keeps
    serving other requests.
    """

    def __init__(self, rounds: int = 12):
        if not 4 <= rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self.rounds = rounds
        # Stands in for the stored digest when the account does not exist
        self._dummy_digest = bcrypt.hashpw(
            _DUMMY_PASSWORD, bcrypt.gensalt(rounds)
        ).decode("utf-8")

    @staticmethod
    def _encode(plaintext: str) -> bytes:
        if not plaintext:
            raise InvalidInputError("Password must be a non-empty string")
        return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password.

        Returns:
            bcrypt digest (60 chars, salt and cost embedded)

        Raises:
            InvalidInputError: plaintext is None or empty
        """
        secret = self._encode(plaintext)
        return bcrypt.hashpw(secret, bcrypt.gensalt(self.rounds)).decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Check a plaintext guess against a stored digest.

        Raises:
            InvalidInputError: plaintext is None or empty
            HashingError: digest is not a valid bcrypt hash
        """
        secret = self._encode(plaintext)
        try:
            return bcrypt.checkpw(secret, digest.encode("utf-8"))
        except (ValueError, AttributeError) as exc:
            raise HashingError("Stored password hash is not a valid bcrypt digest") from exc

    async def hash_async(self, plaintext: str) -> str:
        return await asyncio.to_thread(self.hash, plaintext)

    async def verify_async(self, plaintext: str, digest: str) -> bool:
        return await asyncio.to_thread(self.verify, plaintext, digest)

    def verify_dummy(self, plaintext: str) -> bool:
        """
        Run one verification against a digest that matches no account.

        Costs the same as verify() on a real digest, so a login for an
        unknown email takes as long as one with a wrong password.
        """
        return self.verify(plaintext, self._dummy_digest)

    async def verify_dummy_async(self, plaintext: str) -> bool:
        return await asyncio.to_thread(self.verify_dummy, plaintext)
