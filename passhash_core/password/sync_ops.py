"""
Sync Password Operations
========================
Module-level hashing and verification using the cached hasher.
"""

from .hasher import get_cached_hasher
from .kdf import Secret


def hash_password_sync(password: Secret) -> str:
    """Hash a password with the default Argon2id parameters."""
    return get_cached_hasher().hash(password)


def verify_password_sync(password: Secret, hash: str) -> bool:
    """Verify a password against an Argon2id hash. Never raises on bad input."""
    return get_cached_hasher().verify(password, hash)
