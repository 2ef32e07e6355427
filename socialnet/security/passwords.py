"""
SocialNet Backend — Credential Manager
======================================

What:  Hashes and verifies passwords with argon2id.
How:   Wraps argon2-cffi's PasswordHasher. Every hash gets a random salt and
       embeds its own parameters, so hashes made under older settings keep
       verifying after the cost is raised.
Who:   Used by UserService at registration and login.

Both operations are CPU and memory bound. Async callers run them in a
worker thread (`starlette.concurrency.run_in_threadpool`).
"""

import logging

from argon2 import PasswordHasher, Type
from argon2.exceptions import HashingError, InvalidHashError, VerificationError

from socialnet.exceptions import InternalError

logger = logging.getLogger(__name__)


class CredentialManager:
    """
    One-way password hashing.

    Attributes:
        hasher: Configured argon2 PasswordHasher (argon2id variant)
    """

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        self.hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            type=Type.ID,
        )

    def hash(self, plaintext: str) -> str:
        """
        Return an encoded argon2id hash of `plaintext`.

        Raises:
            InternalError: argon2 could not compute the hash (e.g. memory exhaustion)
        """
        try:
            return self.hasher.hash(plaintext)
        except HashingError as e:
            logger.error("Password hashing failed: %s", str(e))
            raise InternalError(context={"error_type": type(e).__name__}) from e

    def verify(self, credential_hash: str, plaintext: str) -> bool:
        """
        Check `plaintext` against a stored hash.

        The comparison is argon2's own constant-time check. A mismatch, a
        corrupt stored hash, or any other verification failure returns False.
        """
        try:
            return self.hasher.verify(credential_hash, plaintext)
        except VerificationError:
            # Includes VerifyMismatchError
            return False
        except InvalidHashError:
            logger.warning("Stored password hash is not a valid argon2 hash")
            return False

    def needs_rehash(self, credential_hash: str) -> bool:
        """True when the hash was made with parameters other than the current ones."""
        try:
            return self.hasher.check_needs_rehash(credential_hash)
        except InvalidHashError:
            return True
