"""
Password Hasher
===============
Argon2id hashing and verification bound to a set of cost parameters.
"""

import hmac
from functools import lru_cache
from typing import Optional

import structlog
from argon2.exceptions import HashingError

from ..config import HashConfig
from ..exceptions import PasswordHashError
from .encoding import decode, encode
from .kdf import Secret, derive_key
from .params import Parameters
from .salt import generate_salt

logger = structlog.get_logger(__name__)

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class Argon2idHasher:
    """Hash and verify passwords as PHC-encoded Argon2id strings."""

    def __init__(self, config: Optional[HashConfig] = None):
        self.config = config or HashConfig()

    def hash(self, password: Secret) -> str:
        """
        Hash a password with a fresh random salt.

        Args:
            password: Plain text password (str is UTF-8 encoded)

        Returns:
            Encoded hash string (algorithm, version, costs, salt and key)

        Raises:
            RandomSourceError: If no salt could be generated
        """
        params = Parameters(
            salt=generate_salt(self.config.salt_len),
            time_cost=self.config.time_cost,
            memory_cost=self.config.memory_cost,
            parallelism=self.config.resolve_parallelism(),
            key_len=self.config.key_len,
        )
        key = derive_key(password, params)

        logger.debug(
            "password_hash_created",
            time_cost=params.time_cost,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
        )
        return encode(key, params)

    def verify(self, password: Secret, encoded: str) -> bool:
        """
        Check a password against an encoded hash.

        Malformed hashes, version mismatches and wrong passwords all
        return False.
        """
        try:
            key, params = decode(encoded)
        except PasswordHashError as e:
            logger.debug("password_hash_rejected", reason=e.code)
            return False

        try:
            candidate = derive_key(password, params)
        except HashingError as e:
            logger.warning("password_kdf_rejected_parameters", error=str(e))
            return False

        return hmac.compare_digest(key, candidate)

    def check_needs_rehash(self, encoded: str) -> bool:
        """
        True if ``encoded`` was not produced with this hasher's parameters.

        Undecodable strings and bcrypt hashes always need a rehash. When
        parallelism follows the host CPU count it is not compared, so hosts
        with different core counts do not rewrite each other's hashes.
        """
        if not encoded or encoded.startswith(BCRYPT_PREFIXES):
            return True

        try:
            _, params = decode(encoded)
        except PasswordHashError:
            return True

        return (
            params.time_cost != self.config.time_cost
            or params.memory_cost != self.config.memory_cost
            or (
                self.config.parallelism is not None
                and params.parallelism != self.config.parallelism
            )
            or params.key_len != self.config.key_len
            or len(params.salt) != self.config.salt_len
        )


@lru_cache(maxsize=1)
def get_cached_hasher() -> Argon2idHasher:
    """Get cached hasher instance using the environment configuration."""
    return Argon2idHasher()
